"""Tests that the example scripts run and print what they promise."""

import importlib.util
from pathlib import Path

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def load_example(name):
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_virtual_disk_default(capsys):
    demo = load_example("virtual_disk")
    assert demo.main([]) == 0

    out = capsys.readouterr().out
    assert "/home/user/code/js/test.js" in out
    assert "7 files of 16 nodes, 126,020 bytes" in out
    assert "Smallest: hosts (300 bytes)" in out
    assert "Largest:  test.js (40,000 bytes)" in out
    assert "'ls' lives in directory 'bin'" in out


def test_virtual_disk_missing_name(capsys):
    demo = load_example("virtual_disk")
    demo.main(["nothing-here"])
    assert "'nothing-here' not found" in capsys.readouterr().out
