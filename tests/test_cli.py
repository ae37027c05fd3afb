"""
Command line behaviour: output lines, JSON report, exit codes.
"""

import os
from pathlib import Path

import order_includes.cli as cli_mod
from order_includes.cli import EXIT_NO_FILES, EXIT_OK, EXIT_UNEXPECTED, EXIT_USAGE, main
from tests.infrastructure import go_source, jload, read, run_cli, write


def test_processes_directory_and_prints_one_line_per_file(goproj: Path, capsys):
    rc = main([str(goproj)])
    out, err = capsys.readouterr()

    assert rc == EXIT_OK
    assert out.splitlines() == [
        f"[{goproj / 'main.go'}][done]",
        f"[{goproj / 'pkg' / 'empty.go'}][failed to read from file]",
        f"[{goproj / 'pkg' / 'util.go'}][no includes found]",
    ]
    assert err == ""


def test_no_arguments_is_usage_error(capsys):
    rc = main([])
    _, err = capsys.readouterr()
    assert rc == EXIT_USAGE == -1
    assert "usage:" in err


def test_too_many_arguments_is_usage_error(tmp_path: Path, capsys):
    rc = main([str(tmp_path / "a.go"), str(tmp_path / "b.go")])
    _, err = capsys.readouterr()
    assert rc == EXIT_USAGE
    assert "usage:" in err


def test_non_go_file_gives_no_files_code(tmp_path: Path, capsys):
    p = write(tmp_path / "main.py", "import os\n")
    rc = main([str(p)])
    out, err = capsys.readouterr()

    assert rc == EXIT_NO_FILES == -3
    assert out == ""
    assert "no go files to order includes" in err


def test_directory_without_go_files(tmp_path: Path, capsys):
    write(tmp_path / "docs" / "readme.md", "x\n")
    assert main([str(tmp_path)]) == EXIT_NO_FILES


def test_failed_files_do_not_change_exit_code(tmp_path: Path, capsys):
    p = write(tmp_path / "empty.go", "")
    assert main([str(p)]) == EXIT_OK
    out, _ = capsys.readouterr()
    assert out == f"[{p}][failed to read from file]\n"


def test_json_report(goproj: Path, capsys):
    rc = main(["--json", str(goproj)])
    out, _ = capsys.readouterr()

    assert rc == EXIT_OK
    data = jload(out)
    assert data["target"] == str(goproj)
    assert [f["message"] for f in data["files"]] == ["done", "failed to read from file", "no includes found"]
    assert [f["status"] for f in data["files"]] == ["DONE", "READ_FAILURE", "NO_IMPORT_BLOCK"]


def test_config_file_option(goproj: Path, capsys):
    cfg = write(goproj.parent / "cfg.yaml", "platform_prefixes: [github.com/]\nthird_party_prefixes: [platform/]\n")
    rc = main(["--config", str(cfg), str(goproj / "main.go")])

    assert rc == EXIT_OK
    assert read(goproj / "main.go") == go_source('\t"fmt"', "", '\t"github.com/x/y"', "", '\t"platform/z"')


def test_local_config_file_is_picked_up(goproj: Path, tmp_path: Path, capsys):
    # conftest chdirs into tmp_path
    write(tmp_path / ".order-includes.yaml", "exclude: [pkg/]\n")
    assert main([str(goproj)]) == EXIT_OK
    out, _ = capsys.readouterr()
    assert out == f"[{goproj / 'main.go'}][done]\n"


def test_invalid_config_is_reported(goproj: Path, capsys):
    cfg = write(goproj.parent / "cfg.yaml", "schema_version: 42\n")
    rc = main(["--config", str(cfg), str(goproj)])
    out, err = capsys.readouterr()

    assert rc == EXIT_USAGE
    assert out == ""
    assert "Unsupported config schema" in err


def test_unexpected_error_is_generic(goproj: Path, capsys, monkeypatch):
    def boom(target, cfg):
        raise RuntimeError("secret detail")

    monkeypatch.setattr(cli_mod, "run_order", boom)
    rc = main([str(goproj)])
    out, err = capsys.readouterr()

    assert rc == EXIT_UNEXPECTED == -2
    assert out == ""
    assert "unexpected error occured" in err
    assert "secret detail" not in err


def test_unlistable_subdirectory_is_unexpected_error(goproj: Path, capsys, monkeypatch):
    real_scandir = os.scandir

    def scandir(path="."):
        if Path(path).name == "pkg":
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    rc = main([str(goproj)])
    out, err = capsys.readouterr()

    assert rc == EXIT_UNEXPECTED
    assert out == ""
    assert "unexpected error occured" in err


def test_module_entry_point(goproj: Path, tmp_path: Path):
    cp = run_cli(tmp_path, str(goproj / "main.go"))
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == f"[{goproj / 'main.go'}][done]\n"


def test_module_entry_point_usage_exit_status(tmp_path: Path):
    cp = run_cli(tmp_path)
    # -1 is reported by the OS as 255
    assert cp.returncode == 255
    assert "usage:" in cp.stderr
