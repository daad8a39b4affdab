import sys
from pathlib import Path

import pytest

from run_tests import build_parser, child_environment, pytest_command


def test_unit_suite_command_with_tags():
    cmd = pytest_command("unit", ["P0", "smoke"])

    assert cmd[:4] == [sys.executable, "-m", "pytest", "testsuites/unit"]
    assert cmd[4:6] == ["-m", "P0 or smoke"]
    assert "--alluredir" not in cmd
    assert cmd[-1] == "-q"


def test_allure_results_and_verbosity():
    cmd = pytest_command("ui", allure_results=Path("reports/allure-results"), verbose=True)

    assert "testsuites/ui_testing/tests" in cmd
    assert cmd[cmd.index("--alluredir") + 1] == str(Path("reports/allure-results"))
    assert cmd[-1] == "-v"


def test_unknown_suite_is_rejected():
    with pytest.raises(ValueError):
        pytest_command("api")


def test_env_name_is_exported_to_child_process():
    environ = child_environment("staging", base={"PATH": "/bin"})

    assert environ == {"PATH": "/bin", "ENVIRONMENT": "staging"}
    assert "ENVIRONMENT" not in child_environment(None, base={})


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.suite == "all"
    assert args.tags == []
    assert args.no_allure is False
