"""Tests for markov.config and the demo CLI."""
import pytest

import markov
from markov import config
from markov.cli import N_STATES, SCENARIO, main, run


class TestConfig:

    def test_get_dotted(self):
        assert config.get('render.precision') == 3
        assert config.get('tolerance.row_sum') == 1e-9

    def test_package_level_getter(self):
        assert markov.get_config('demo.power') == 2
        assert markov.get_config('render.separator') == ' '
        assert markov.get_config('demo.size') is None
        assert markov.CONFIG is config.CONFIG

    def test_get_missing(self):
        assert config.get('render.nope') is None
        assert config.get('nope.deeper', 5) == 5

    def test_load_merges(self, tmp_path):
        path = tmp_path / 'overrides.yaml'
        path.write_text("render:\n  precision: 1\n")
        cfg = config.load(path)
        assert cfg['render']['precision'] == 1
        assert cfg['render']['separator'] == ' '
        assert cfg['tolerance']['row_sum'] == 1e-9
        # defaults untouched
        assert config.CONFIG['render']['precision'] == 3

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert config.load(path) == config.CONFIG

    def test_load_rejects_non_mapping(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            config.load(path)


class TestCli:

    def test_size_covers_scenario(self):
        assert N_STATES == 3
        assert all(0 <= s < N_STATES for pair in SCENARIO for s in pair)

    def test_size_not_configurable(self, tmp_path, capsys):
        path = tmp_path / 'small.yaml'
        path.write_text("demo:\n  size: 2\n")
        main(['--quiet', '--config', str(path)])
        out = capsys.readouterr().out
        assert out.startswith("Initial Matrix:\n0.000 0.000 0.000\n")
        assert "Max probability index for M[2]: 0" in out

    def test_run_returns_square(self, capsys):
        result = run(verbose=False)
        assert result.to_list()[0][0] == pytest.approx(0.36)
        out = capsys.readouterr().out
        assert "Max probability index for M[2]: 0" in out
        assert "Min probability index for M[2]: 1" in out
        assert "Max probability index for M[1]: 0" in out
        assert out.rstrip().endswith("0.320 0.320 0.360")

    def test_main_verbose_prints_every_step(self, capsys):
        main([])
        out = capsys.readouterr().out
        assert out.startswith("Initial Matrix:\n0.000 0.000 0.000")
        assert "0.200 0.400 0.400\n0.400 0.200 0.400\n0.400 0.400 0.200" in out
        assert "Matrix Raised to Power 2:" in out

    def test_main_power_and_quiet(self, capsys):
        main(['--quiet', '--power', '3'])
        out = capsys.readouterr().out
        assert "Matrix Raised to Power 3:" in out
        assert "0.200 0.400 0.400" not in out

    def test_main_config_file(self, tmp_path, capsys):
        path = tmp_path / 'demo.yaml'
        path.write_text("render:\n  precision: 2\ndemo:\n  power: 1\n")
        main(['--quiet', '--config', str(path)])
        out = capsys.readouterr().out
        assert "Matrix Raised to Power 1:" in out
        assert out.rstrip().endswith("0.40 0.40 0.20")
