from click.testing import CliRunner

from morphogenesis.cli import cli


class TestCli:
    def test_grow(self, four_cell_genome):
        result = CliRunner().invoke(cli, ['grow', four_cell_genome])
        assert result.exit_code == 0
        assert "Cells: 4, Generations: 2" in result.output
        assert "'^e'" in result.output

    def test_grow_verbose_lists_cells(self, four_cell_genome):
        result = CliRunner().invoke(cli, ['grow', four_cell_genome, '-v'])
        assert result.exit_code == 0
        assert result.output.count("gen 1") == 3

    def test_grow_rejects_empty_cap(self):
        result = CliRunner().invoke(cli, ['grow', 'nsew', '--max-cells', '0'])
        assert result.exit_code != 0

    def test_evolve(self, tmp_path):
        out = tmp_path / "best.png"
        result = CliRunner().invoke(cli, ['evolve', '-g', '2', '-p', '6', '-l', '40',
                                          '--seed', '3', '-o', str(out)])
        assert result.exit_code == 0, result.output
        assert "Best genome" in result.output
        assert out.exists()

    def test_evolve_rejects_bad_rate(self):
        result = CliRunner().invoke(cli, ['evolve', '-g', '1', '-p', '2',
                                          '--mutation-rate', '2'])
        assert result.exit_code != 0
        assert "mutation_rate" in result.output

    def test_render(self, four_cell_genome, tmp_path):
        out = tmp_path / "body.png"
        result = CliRunner().invoke(cli, ['render', four_cell_genome, '-o', str(out),
                                          '--size', '64'])
        assert result.exit_code == 0
        assert out.exists()

    def test_render_frames(self, four_cell_genome, tmp_path):
        out = tmp_path / "frames"
        result = CliRunner().invoke(cli, ['render', four_cell_genome, '-o', str(out),
                                          '--size', '32', '--frames', '2'])
        assert result.exit_code == 0
        assert sorted(p.name for p in out.iterdir()) == ['frame_0000.png', 'frame_0001.png']
