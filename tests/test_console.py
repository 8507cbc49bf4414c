from engine import run_audit
from measurement import RawMeasurement
from ui import console


def test_render_result_lists_checks_and_band(scenario_a, capsys) -> None:
    console.render_result(run_audit(scenario_a, "mobile"), heading="https://a.example")
    out = capsys.readouterr().out
    assert "https://a.example (mobile)" in out
    for label in ("Links present", "HTTPS enabled", "FCP: 1200 ms", "Total Load Time: 2200 ms"):
        assert label in out
    assert "91% (pass)" in out
    assert "11/12 checks passed" in out
    assert console.C_GREEN + console.C_BOLD + "91%" in out


def test_render_failing_band_in_red(capsys) -> None:
    console.render_result(run_audit(RawMeasurement(total_elapsed=99999), "desktop"))
    out = capsys.readouterr().out
    assert "Overall Score (desktop)" in out
    assert "0% (fail)" in out
    assert console.C_RED + console.C_BOLD + "0%" in out
