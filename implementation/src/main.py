from __future__ import annotations

import asyncio
from typing import Optional, Set

from raylib_compat import (
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_R,
    KEY_SPACE,
    MOUSE_BUTTON_LEFT,
    begin_drawing,
    clear_background,
    close_window,
    end_drawing,
    get_char_pressed,
    get_mouse_position,
    get_time,
    init_window,
    is_key_pressed,
    is_mouse_button_pressed,
    set_exit_key,
    set_target_fps,
    window_should_close,
)

from bubbles.config import load_settings
from bubbles.score_client import ScoreClient
from bubbles.simulation import Simulation
from bubbles.store import RoundState
from bubbles.ui import BACKGROUND, Ui


class ScoreSync:
    """Runs leaderboard requests in worker threads so frames never wait on them."""

    def __init__(self, client: ScoreClient, ui: Ui, limit: int) -> None:
        self.client = client
        self.ui = ui
        self.limit = limit
        self._tasks: Set[asyncio.Task] = set()

    def _spawn(self, coro) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _refresh(self) -> None:
        records = await asyncio.to_thread(self.client.fetch_top_scores, self.limit)
        if records:
            self.ui.top_scores = records

    async def _submit_then_refresh(self, name: Optional[str], score: int) -> None:
        await asyncio.to_thread(self.client.submit_score, name, score)
        await self._refresh()

    def refresh(self) -> None:
        self._spawn(self._refresh())

    def submit(self, name: Optional[str], score: int) -> None:
        self._spawn(self._submit_then_refresh(name, score))

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)


def _handle_name_entry(sim: Simulation, ui: Ui, sync: ScoreSync) -> None:
    codepoint = get_char_pressed()
    while codepoint > 0:
        ui.type_char(codepoint)
        codepoint = get_char_pressed()
    if is_key_pressed(KEY_BACKSPACE):
        ui.backspace()
    if is_key_pressed(KEY_ENTER):
        sync.submit(ui.name_entry, sim.state.score)
        ui.submitted = True
        ui.close_prompt()
    elif is_key_pressed(KEY_ESCAPE):
        ui.close_prompt()


async def main() -> None:
    settings = load_settings()
    init_window(settings.window_width, settings.window_height, "Bubble Shooter")
    set_exit_key(0)  # Escape closes the name prompt, not the window
    set_target_fps(settings.target_fps)

    ui = Ui()
    sim = Simulation(settings=settings)
    sync = ScoreSync(
        ScoreClient(settings.leaderboard_url, timeout=settings.request_timeout),
        ui,
        settings.leaderboard_limit,
    )

    def on_game_over(state: RoundState) -> None:
        print(
            f"[game] round over, score={state.score} shots={state.shots_fired} "
            f"popped={state.bubbles_popped} dropped={state.bubbles_dropped} misses={state.misses}"
        )
        ui.open_prompt()

    sim.game_over_listeners.append(on_game_over)
    sim.reset_listeners.append(lambda _sim: sync.refresh())
    sync.refresh()

    try:
        while not window_should_close():
            mouse = get_mouse_position()
            mx = mouse.x if hasattr(mouse, "x") else mouse[0]
            my = mouse.y if hasattr(mouse, "y") else mouse[1]

            if sim.game_over:
                if ui.prompt_open:
                    _handle_name_entry(sim, ui, sync)
                elif is_key_pressed(KEY_R):
                    sim.reset_game()
            else:
                sim.aim(mx, my)
                if is_mouse_button_pressed(MOUSE_BUTTON_LEFT) or is_key_pressed(KEY_SPACE):
                    sim.fire(get_time())
                if is_key_pressed(KEY_R):
                    sim.reset_game()
                report = sim.tick()
                if report.popped or report.dropped:
                    print(f"[game] popped={report.popped} dropped={report.dropped} score={sim.state.score}")

            begin_drawing()
            clear_background(BACKGROUND)
            ui.draw(sim.snapshot())
            end_drawing()

            # Let finished leaderboard requests deliver their results
            await asyncio.sleep(0)
    finally:
        await sync.drain()
        close_window()


if __name__ == "__main__":
    asyncio.run(main())
