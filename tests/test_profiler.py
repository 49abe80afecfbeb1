from docindex.profiler import Profiler


def test_timers_accumulate():
    profiler = Profiler()
    with profiler.timer("step"):
        pass
    with profiler.timer("step"):
        pass
    assert list(profiler.timings) == ["step"]
    assert profiler.timings["step"] >= 0


def test_report(tmp_path):
    profiler = Profiler()
    profiler.start_global_timer()
    with profiler.timer("Index Saving"):
        pass
    profiler.log_message("Auto-selected index mode: standard")

    path = tmp_path / "performance.log"
    report = profiler.generate_report(doc_count=2, vocab_size=1, filename=str(path))

    assert "Index Saving" in report
    assert "Documents: 2" in report
    assert "Auto-selected index mode: standard" in report
    assert path.read_text() == report


def test_global_time():
    profiler = Profiler()
    assert profiler.get_global_time() == 0.0
    profiler.start_global_timer()
    assert profiler.get_global_time() >= 0.0
    assert "Global Time:" in profiler.generate_report(doc_count=0, vocab_size=0)
