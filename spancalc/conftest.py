import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # keep SPANCALC_* settings and .env files of the developer out of the tests
    for name in ("RPN", "PROMPT", "HISTORY_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(f"SPANCALC_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
