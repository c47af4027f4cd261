import itertools

import pytest

from morphogenesis.alphabet import (ALPHABET, MORPHOGENS, STEMS, PROMOTERS,
                                    CODE_MORPHOGENS, candidate_start_sequences,
                                    lookup_start_sequence, start_sequence_table)


class TestAlphabet:
    def test_alphabet_is_sorted_and_complete(self):
        assert len(ALPHABET) == 12
        assert ALPHABET == ''.join(sorted(ALPHABET))
        assert set(ALPHABET) == set(CODE_MORPHOGENS + STEMS + PROMOTERS)

    def test_generation_morphogen_is_not_a_symbol(self):
        assert 'g' in MORPHOGENS
        assert 'g' not in ALPHABET


class TestStartSequenceTable:
    def test_every_ranking_has_an_entry(self):
        table = start_sequence_table()
        assert len(table) == 120
        for ranking in itertools.permutations(MORPHOGENS):
            assert ''.join(ranking) in table

    def test_rankings_wrap_around_the_sequences(self):
        sequences = [''.join(p) for p in itertools.combinations(ALPHABET, 2)]
        rankings = [''.join(p) for p in itertools.permutations(MORPHOGENS)]
        table = start_sequence_table()
        for index, ranking in enumerate(rankings):
            assert table[ranking] == sequences[index % len(sequences)]

    def test_table_is_built_once_and_read_only(self):
        table = start_sequence_table()
        assert start_sequence_table() is table
        with pytest.raises(TypeError):
            table['nsewg'] = 'xx'

    def test_lookup(self):
        assert lookup_start_sequence('nsewg') == ' -'
        assert lookup_start_sequence('sewgn') == '>n'
        with pytest.raises(KeyError):
            lookup_start_sequence('nnnnn')

    def test_candidates_are_distinct_in_table_order(self):
        candidates = candidate_start_sequences()
        assert len(candidates) == 66
        assert len(set(candidates)) == 66
        assert candidates[0] == ' -'
        assert all(len(c) == 2 for c in candidates)
