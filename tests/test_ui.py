import pytest
from textual.containers import Container
from textual.widgets import Button

from tui_stopwatch import StopwatchConfig, StopwatchUI
from tui_stopwatch.displays import ClockDisplay, ElapsedDisplay

def label(app: StopwatchUI) -> str:
    return str(app.query_one('#action-btn', Button).label)

def elapsedText(app: StopwatchUI) -> str:
    return app.query_one('#elapsed', ElapsedDisplay).displayed

@pytest.mark.asyncio
async def test_initial_screen(clock):
    app = StopwatchUI(StopwatchConfig(clock_format='%H:%M:%S'), clock=clock)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert label(app) == 'Start'
        assert elapsedText(app) == '0:00.000'
        assert app.query_one('#clock', ClockDisplay).displayed == '09:30:00.000'
        assert app.query_one('#elapsed-pane', Container).has_class('-stopped')
        assert app.refreshDriver.is_running

@pytest.mark.asyncio
async def test_buttons_drive_the_stopwatch(clock):
    app = StopwatchUI(StopwatchConfig(decimal_separator='.'), clock=clock)
    async with app.run_test() as pilot:
        await pilot.click('#action-btn')
        await pilot.pause(0.3)
        assert app.stopwatch.phase == 'Running'
        assert label(app) == 'Pause'

        clock.advance(1.5)
        app.refreshDriver.fire()
        assert elapsedText(app) == '0:01.500'

        await pilot.click('#action-btn')
        await pilot.pause(0.3)
        assert label(app) == 'Resume'
        assert app.query_one('#elapsed-pane', Container).has_class('-paused')

        clock.advance(60)
        app.refreshDriver.fire()
        assert elapsedText(app) == '0:01.500'

        await pilot.click('#stop-btn')
        await pilot.pause(0.3)
        assert label(app) == 'Start'
        assert elapsedText(app) == '0:00.000'

@pytest.mark.asyncio
async def test_key_bindings(clock):
    app = StopwatchUI(StopwatchConfig(decimal_separator='.'), clock=clock)
    async with app.run_test() as pilot:
        await pilot.press('space')
        await pilot.pause()
        assert app.stopwatch.phase == 'Running'
        clock.advance(65.5)
        app.refreshDriver.fire()
        assert elapsedText(app) == '1:05.500'
        await pilot.press('s')
        await pilot.pause()
        assert app.stopwatch.phase == 'Stopped'
        assert elapsedText(app) == '0:00.000'

@pytest.mark.asyncio
async def test_backwards_clock_shows_placeholder(clock):
    app = StopwatchUI(clock=clock)
    async with app.run_test() as pilot:
        app.stopwatch.onStart()
        await pilot.pause()
        clock.advance(-5)
        app.refreshDriver.fire()
        assert elapsedText(app) == '--:--.---'

@pytest.mark.asyncio
async def test_focus_switches_refresh_rate(clock):
    app = StopwatchUI(StopwatchConfig(active_hz=50, idle_hz=2), clock=clock)
    async with app.run_test() as pilot:
        app.on_app_blur()
        await pilot.pause()
        assert app.refreshDriver.interval == pytest.approx(0.5)
        app.on_app_focus()
        await pilot.pause()
        assert app.refreshDriver.interval == pytest.approx(0.02)

@pytest.mark.asyncio
async def test_title_from_config(clock):
    app = StopwatchUI(StopwatchConfig(title='Tea'), clock=clock)
    async with app.run_test():
        assert app.title == 'Tea'
