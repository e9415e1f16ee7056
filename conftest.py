import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="quick",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# Any test function taking one of these argument names is run once per value
# for the chosen --level. Keys are tuples so several argument names can share
# one set of values.
parameter_values = {
    ("seed",): {"quick": [0, 1, 2], "full": range(0, 25)},
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])
