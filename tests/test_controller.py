from chart import ControllerState, DependencyGate, PlotController, RunIdentity

RUN = RunIdentity(2, 4)


def test_init_builds_empty_chart_with_axis_bounds(controller, factory, backend):
    controller.init(0, 300_000, RUN)

    chart = factory.charts[-1]
    assert controller.state is ControllerState.READY
    assert chart.library is backend
    assert (chart.config.x_min, chart.config.x_max) == (0, 300_000)
    assert (chart.config.y_min, chart.config.y_max) == (0, 100)
    assert len(controller.series) == 0
    assert len(controller.failures) == 0


def test_out_of_order_upserts_scenario(controller, factory):
    controller.init(0, 300_000, RUN)
    controller.upsert(120_000, 73.5, RUN)
    controller.upsert(60_000, 81.0, RUN)
    controller.upsert(60_000, 79.2, RUN)

    assert [(s.position, s.value) for s in controller.series] == [(60_000, 79.2), (120_000, 73.5)]
    assert factory.charts[-1].updates == 3


def test_stale_run_is_dropped(controller, factory):
    controller.init(0, 300_000, RUN)
    controller.upsert(60_000, 81.0, RUN)

    controller.upsert(100, 50, RunIdentity(9, 9))
    controller.mark(100, RunIdentity(9, 9))

    assert controller.series.positions() == [60_000]
    assert len(controller.failures) == 0
    assert factory.charts[-1].updates == 1


def test_mark_twice_gives_one_marker_and_one_redraw(controller, factory):
    controller.init(0, 300_000, RUN)
    controller.mark(150_000, RUN)
    controller.mark(150_000, RUN)

    assert controller.failures.positions() == [150_000]
    assert factory.charts[-1].updates == 1


def test_reinit_destroys_previous_chart_and_starts_empty(controller, factory):
    controller.init(0, 300_000, RUN)
    controller.upsert(1_000, 10.0, RUN)
    first = factory.charts[-1]

    new_run = RunIdentity(3, 4)
    controller.init(10_000, 20_000, new_run)
    second = factory.charts[-1]

    assert first.destroyed
    assert second is not first and not second.destroyed
    assert controller.chart is second
    assert len(controller.series) == 0
    assert second.series is controller.series

    # Late result from the first run
    controller.upsert(2_000, 20.0, RUN)
    assert len(controller.series) == 0


def test_calls_before_init_are_ignored(controller, factory):
    controller.upsert(1_000, 10.0, RUN)
    controller.mark(1_000, RUN)
    assert factory.charts == []
    assert controller.state is ControllerState.UNINITIALIZED


def test_gate_timeout_leaves_controller_inert(scheduler, factory, companion, viewport):
    gate = DependencyGate(scheduler, probe=lambda: None)
    controller = PlotController(factory, scheduler, gate=gate,
                                companion=companion, viewport=viewport)

    controller.init(0, 300_000, RUN)
    scheduler.advance(5_000)

    controller.upsert(1_000, 10.0, RUN)
    controller.mark(2_000, RUN)
    assert factory.charts == []
    assert controller.chart is None
    assert controller.state is ControllerState.UNINITIALIZED
    assert len(controller.series) == 0
    assert companion.widths == []


def test_newer_init_wins_while_backend_is_loading(scheduler, factory, companion, viewport):
    state = {"loaded": None}
    gate = DependencyGate(scheduler, probe=lambda: state["loaded"])
    controller = PlotController(factory, scheduler, gate=gate,
                                companion=companion, viewport=viewport)

    controller.init(0, 100, RUN)
    newer = RunIdentity(5, 5)
    controller.init(0, 200, newer)

    state["loaded"] = object()
    scheduler.advance(1_000)

    assert len(factory.charts) == 1
    assert factory.charts[0].config.x_max == 200
    assert controller.active_run == newer


def test_chart_ready_signal_carries_run(controller):
    ready = []
    controller.chart_ready.connect(ready.append)
    controller.init(0, 300_000, RUN)
    assert ready == [RUN]


def test_init_arms_layout_sync_once(controller, viewport, companion):
    controller.init(0, 300_000, RUN)
    controller.init(0, 300_000, RunIdentity(2, 5))

    assert viewport.filters == [controller.synchronizer]
    # 640px fake chart minus the 10px buffer, applied on every build
    assert companion.widths == [630, 630]
