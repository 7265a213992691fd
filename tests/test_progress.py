from brand_dna.progress import PIPELINE_STAGES, ProgressReporter


def test_stage_checkpoints_are_non_decreasing():
    percents = [stage.percent for stage in PIPELINE_STAGES]
    assert percents == sorted(percents)
    assert percents[0] == 0 and percents[-1] == 98


def test_emit_clamps_and_never_goes_backwards():
    events = []
    reporter = ProgressReporter(lambda label, pct: events.append(pct))
    reporter.emit("a", 40)
    reporter.emit("b", 20)
    reporter.emit("c", 150)
    assert events == [40, 40, 100]
    assert reporter.last_percent == 100


def test_callback_errors_are_contained():
    def broken(label, pct):
        raise ConnectionError("client went away")

    reporter = ProgressReporter(broken)
    reporter.emit("Navigating", 10)
    assert reporter.last_percent == 10


def test_default_reporter_is_noop():
    ProgressReporter().stage(PIPELINE_STAGES[0])
