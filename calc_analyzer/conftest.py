import pytest


@pytest.fixture
def typed_lines(monkeypatch):
    """Feed builtins.input from a list of lines, then raise EOFError like a closed stdin.

    Calling the fixture with the lines installs it and returns the list of prompts shown.
    """
    prompts = []

    def install(lines):
        answers = iter(lines)

        def fake_input(prompt=''):
            prompts.append(prompt)
            line = next(answers, None)
            if line is None:
                raise EOFError
            return line

        monkeypatch.setattr('builtins.input', fake_input)
        return prompts

    return install


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call" and report.failed:
        print(f"FAILED CALCULATION TEST: {item.module.__name__}::{item.name}")
