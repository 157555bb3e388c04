#!/usr/bin/env python3
"""
Gravity Sim application entry point.

What this module does
- Parses command-line options and configures logging.
- Builds the SimulationController, loads the default scenario and opens the
  Pygame viewport plus (optionally) the Dear PyGui control panel.
- Runs a single loop: input, physics ticks, drawing, panel frame. The physics
  is only ever stepped from this loop, between frames.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python gravity_sim.py` (see `--help` for options)

Closing either window shuts the application down.
"""
import argparse
import logging
import random
import time

from gravsim.constants import FPS_CAP, SIMULATION_SPEEDS, VIEW_HEIGHT, VIEW_WIDTH
from gravsim.controller import SimulationController
from gravsim.renderer import PygameRenderer
from gravsim.scenarios import DEFAULT_SCENARIO, SCENARIOS

logger = logging.getLogger("gravity_sim")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive 2D N-body gravity sandbox.")
    parser.add_argument("--width", type=int, default=VIEW_WIDTH, help="viewport width in pixels")
    parser.add_argument("--height", type=int, default=VIEW_HEIGHT, help="viewport height in pixels")
    parser.add_argument("--speed", type=int, default=SIMULATION_SPEEDS[0], choices=SIMULATION_SPEEDS,
                        help="physics ticks per rendered frame")
    parser.add_argument("--scenario", default=DEFAULT_SCENARIO, choices=list(SCENARIOS.keys()),
                        help="starting scene")
    parser.add_argument("--run", action="store_true", help="start unpaused")
    parser.add_argument("--no-panel", action="store_true", help="do not open the Dear PyGui control panel")
    parser.add_argument("--seed", type=int, default=None, help="seed for spawned body mass/colour")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return parser.parse_args(argv)


def build_controller(args: argparse.Namespace) -> SimulationController:
    controller = SimulationController(rng=random.Random(args.seed))
    controller.load_scenario(args.scenario)
    controller.set_sim_speed(args.speed)
    controller.paused = not args.run
    return controller


def run_loop(controller: SimulationController, renderer: PygameRenderer, panel=None) -> None:
    while renderer.running and controller.running:
        frame_start = time.perf_counter()
        renderer.handle_events()
        controller.advance_frame()
        controller.record_frame_time(time.perf_counter() - frame_start)
        renderer.draw()

        if panel is not None:
            if not panel.is_running():
                break
            panel.render_frame()

        renderer.tick(FPS_CAP)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    controller = build_controller(args)
    renderer = PygameRenderer(controller, size=(args.width, args.height))
    renderer.open()

    panel = None
    if not args.no_panel:
        from gravsim.ui import ControlPanel
        panel = ControlPanel(controller, renderer)

    logger.info("Starting with %d bodies, %dx speed, %s",
                len(controller.bodies), controller.sim_speed, "paused" if controller.paused else "running")
    try:
        run_loop(controller, renderer, panel)
    finally:
        controller.running = False
        if panel is not None:
            panel.close()
        renderer.close()
        logger.info("Stopped after %d ticks", controller.sim.tick_count)


if __name__ == "__main__":
    main()
