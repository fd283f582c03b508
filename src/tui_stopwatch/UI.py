from datetime import datetime

from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Footer, Header

from .shared import titled
from .config import StopwatchConfig
from .displays import ClockDisplay, ElapsedDisplay
from .refresh_driver import RefreshDriver
from .stopwatch import Clock, Stopwatch, localNow
from .timer_state import PHASES, TimerState

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("space", "press", "Start/Pause/Resume."),
        Binding("s", "stop", "Stop."),
        Binding("q", "quit", "Quit."),
    ]

    def __init__(
        self,
        config: StopwatchConfig | None = None,
        clock: Clock = localNow,
    ) -> None:
        '''
        `clock` is the single source of instants, both for the
        wall-clock display and for the stopwatch's actions.
        '''
        super().__init__()

        self.config = config or StopwatchConfig()
        self.clock = clock

        self.stopwatch = Stopwatch(clock)
        self.stopwatch.subscribe(self.onStateChanged)
        self.refreshDriver = RefreshDriver(
            self, self.onTick, clock,
            active_hz=self.config.active_hz,
            idle_hz=self.config.idle_hz,
        )

        self.title = self.config.title

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with Vertical(id="body"):
            yield titled(ClockDisplay(
                self.config.clock_format, id="clock",
            ), 'Clock')
            with titled(Container(id="elapsed-pane"), 'Elapsed'):
                yield ElapsedDisplay(
                    self.config.placeholder,
                    self.config.decimal_separator,
                    id="elapsed",
                )
                with Horizontal(id="controls"):
                    yield Button("Start", id="action-btn", variant="primary")
                    yield Button("Stop", id="stop-btn", variant="error")

        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.myUpdate()
        self.onTick(self.clock())
        self.refreshDriver.start()
        self.query_one('#action-btn', Button).focus()

    def on_unmount(self) -> None:
        self.refreshDriver.stop()

    def on_app_focus(self) -> None:
        self.refreshDriver.setActive(True)

    def on_app_blur(self) -> None:
        self.refreshDriver.setActive(False)

    @on(Button.Pressed, '#action-btn')
    def action_press(self) -> None:
        self.stopwatch.onPress()

    @on(Button.Pressed, '#stop-btn')
    def action_stop(self) -> None:
        self.stopwatch.onStop()

    def onStateChanged(self, _: TimerState) -> None:
        self.myUpdate()
        self.onTick(self.clock())

    def onTick(self, now: datetime) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        self.query_one('#clock', ClockDisplay).now = now
        self.query_one('#elapsed', ElapsedDisplay).seconds = (
            self.stopwatch.elapsedSeconds(now)
        )

    def myUpdate(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        phase = self.stopwatch.phase
        bAction: Button = self.query_one('#action-btn', Button)
        bAction.label = self.stopwatch.actionLabel
        cPane: Container = self.query_one('#elapsed-pane', Container)
        cPane.border_subtitle = phase
        for p in PHASES:
            cPane.set_class(p == phase, '-' + p.lower())
