from pathlib import Path

import pytest

from ffxi_spellinfo.parser.dat_paths import DAT_ENV_VAR, resolve_dat_for_cli


def test_explicit_path_wins_over_environment(tmp_path):
    explicit = tmp_path / "a.dat"
    explicit.write_bytes(b"")
    other = tmp_path / "b.dat"
    other.write_bytes(b"")

    assert resolve_dat_for_cli(explicit, {DAT_ENV_VAR: str(other)}) == explicit


def test_environment_used_when_no_explicit_path(tmp_path):
    dat = tmp_path / "spells.dat"
    dat.write_bytes(b"")
    assert resolve_dat_for_cli(None, {DAT_ENV_VAR: str(dat)}) == dat


def test_reads_process_environment_by_default(tmp_path, monkeypatch):
    dat = tmp_path / "spells.dat"
    dat.write_bytes(b"")
    monkeypatch.setenv(DAT_ENV_VAR, str(dat))
    assert resolve_dat_for_cli(None) == dat


def test_nothing_configured():
    with pytest.raises(FileNotFoundError, match="--dat"):
        resolve_dat_for_cli(None, {})


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        resolve_dat_for_cli(tmp_path / "nope.dat", {})


def test_directory_is_not_a_dat(tmp_path):
    with pytest.raises(FileNotFoundError):
        resolve_dat_for_cli(Path(tmp_path), {})
