from flappy.frame_loop import FrameScheduler


def test_tick_runs_pending_callback_once():
    scheduler = FrameScheduler(fps=60)
    calls = []
    assert scheduler.request_frame(lambda: calls.append(1))
    assert scheduler.tick()
    assert calls == [1]
    assert not scheduler.tick()
    assert calls == [1]
    assert scheduler.frame_count == 1


def test_single_pending_request():
    scheduler = FrameScheduler(fps=60)
    calls = []
    assert scheduler.request_frame(lambda: calls.append("a"))
    assert not scheduler.request_frame(lambda: calls.append("b"))
    scheduler.tick()
    assert calls == ["a"]


def test_self_rescheduling_loop_halts_when_callback_stops():
    scheduler = FrameScheduler(fps=60)
    remaining = [3]

    def frame():
        remaining[0] -= 1
        if remaining[0] > 0:
            scheduler.request_frame(frame)

    scheduler.request_frame(frame)
    while scheduler.tick():
        pass
    assert remaining[0] == 0
    assert scheduler.frame_count == 3
    assert not scheduler.pending


def test_cancel():
    scheduler = FrameScheduler(fps=60)
    scheduler.request_frame(lambda: None)
    scheduler.cancel()
    assert not scheduler.pending
    assert not scheduler.tick()
