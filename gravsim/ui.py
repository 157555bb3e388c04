#!/usr/bin/env python3
"""
Dear PyGui control panel.

The panel runs in the same loop as the pygame viewport: the application calls
render_frame() once per frame, and callbacks are drained on that thread
(manual callback management), so the simulator is never touched mid-step.
"""
import logging
from typing import Dict, Optional

import dearpygui.dearpygui as dpg

from .constants import MOVE_SPEEDS, SIMULATION_SPEEDS
from .controller import SimulationController
from .data_models import create_body
from .renderer import PygameRenderer
from .scenarios import DEFAULT_SCENARIO, SCENARIOS

logger = logging.getLogger(__name__)

SYNC_EVERY_FRAMES = 6


def try_float(val) -> Optional[float]:
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


class ControlPanel:
    """
    Simulation controls, body list (follow/delete) and an add-body form.
    """
    def __init__(self, controller: SimulationController, renderer: PygameRenderer):
        self.controller = controller
        self.renderer = renderer
        self._body_labels: Dict[str, int] = {}
        self._frame = 0

        self.status_msg_id = None
        self.body_list_id = None
        self.pos_x_id = None
        self.pos_y_id = None
        self.vel_x_id = None
        self.vel_y_id = None
        self.radius_id = None
        self.mass_id = None
        self.color_id = None
        self.dynamic_id = None

        self._build_ui()

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.configure_app(manual_callback_management=True)
        dpg.create_viewport(title="Gravity Sim - Controls", width=440, height=640)

        with dpg.window(label="Controls", tag="main_window"):
            dpg.add_text("Simulation")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=self._toggle_play)
                dpg.add_button(label="Step", callback=self._step_once)
                dpg.add_text("", tag="state_text")
            with dpg.group(horizontal=True):
                dpg.add_text("Ticks per frame:")
                dpg.add_combo([str(s) for s in SIMULATION_SPEEDS],
                              default_value=str(self.controller.sim_speed), width=80,
                              callback=lambda s, a, u: self._set_sim_speed(a), tag="sim_speed_combo")
            with dpg.group(horizontal=True):
                dpg.add_text("Camera speed:")
                dpg.add_combo([f"{s:.0f}" for s in MOVE_SPEEDS],
                              default_value=f"{self.renderer.camera.move_speed:.0f}", width=80,
                              callback=lambda s, a, u: self._set_move_speed(a), tag="move_speed_combo")
            with dpg.group(horizontal=True):
                dpg.add_checkbox(label="Orbits", default_value=self.controller.render_orbits,
                                 callback=lambda s, a, u: self._set_orbits(a), tag="orbits_checkbox")
                dpg.add_checkbox(label="Relative to followed", default_value=self.controller.relative_orbits,
                                 callback=lambda s, a, u: self._set_relative(a), tag="relative_checkbox")

            dpg.add_separator()
            with dpg.group(horizontal=True):
                dpg.add_text("Scenario:")
                dpg.add_combo(list(SCENARIOS.keys()), default_value=DEFAULT_SCENARIO, width=180,
                              tag="scenario_combo")
                dpg.add_button(label="Load", callback=lambda: self._load_scenario(dpg.get_value("scenario_combo")))

            dpg.add_separator()
            dpg.add_text("Bodies")
            self.body_list_id = dpg.add_listbox(items=[], width=400, num_items=8)
            with dpg.group(horizontal=True):
                dpg.add_button(label="Follow", callback=self._follow_selected)
                dpg.add_button(label="Stop following", callback=self._stop_following)
                dpg.add_button(label="Delete", callback=self._delete_selected)

            dpg.add_separator()
            dpg.add_text("Add Body")
            with dpg.group(horizontal=True):
                self.pos_x_id = dpg.add_input_text(label="Pos X", default_value="0.0", width=100)
                self.pos_y_id = dpg.add_input_text(label="Pos Y", default_value="-300.0", width=100)
            with dpg.group(horizontal=True):
                self.vel_x_id = dpg.add_input_text(label="Vel X", default_value="5.0", width=100)
                self.vel_y_id = dpg.add_input_text(label="Vel Y", default_value="0.0", width=100)
            with dpg.group(horizontal=True):
                self.radius_id = dpg.add_input_text(label="Radius", default_value="5", width=100)
                self.mass_id = dpg.add_input_text(label="Mass", default_value="1.0", width=100)
            self.color_id = dpg.add_color_edit(default_value=(200, 200, 255, 255), label="Color",
                                               no_alpha=True, width=220)
            self.dynamic_id = dpg.add_checkbox(label="Dynamic", default_value=True)
            dpg.add_button(label="Add Body", callback=self._on_add_body_clicked)

            dpg.add_separator()
            self.status_msg_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # Frame loop hooks
    # -----------------------

    def is_running(self) -> bool:
        return dpg.is_dearpygui_running()

    def render_frame(self) -> None:
        dpg.run_callbacks(dpg.get_callback_queue())
        self._frame += 1
        if self._frame % SYNC_EVERY_FRAMES == 0:
            self._sync_ui_with_sim()
        dpg.render_dearpygui_frame()

    def close(self) -> None:
        dpg.destroy_context()

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        self._set_status(msg, color=(255, 120, 120))

    def _toggle_play(self):
        paused = self.controller.toggle_pause()
        self._set_status("Simulation paused." if paused else "Simulation running.")

    def _step_once(self):
        self.controller.single_step()
        self._set_status(f"Stepped to tick {self.controller.sim.tick_count}.")

    def _set_sim_speed(self, value):
        self.controller.set_sim_speed(int(value))

    def _set_move_speed(self, value):
        self.renderer.camera.move_speed = float(value)

    def _set_orbits(self, value):
        self.controller.render_orbits = bool(value)

    def _set_relative(self, value):
        self.controller.relative_orbits = bool(value)

    def _load_scenario(self, name: str):
        self.controller.load_scenario(name)
        self.renderer.camera.following = None
        self._refresh_body_list()
        self._set_status(self.controller.last_message or "")

    def _selected_body_id(self) -> Optional[int]:
        return self._body_labels.get(dpg.get_value(self.body_list_id))

    def _follow_selected(self):
        body = self.controller.sim.find_body(self._selected_body_id())
        if body is None:
            self._set_error("No body selected.")
            return
        self.renderer.camera.following = body.id
        self._set_status("Following selected body.")

    def _stop_following(self):
        self.renderer.camera.following = None
        self._set_status("Camera released.")

    def _delete_selected(self):
        body_id = self._selected_body_id()
        if body_id is None:
            self._set_error("No body selected.")
            return
        blocker = self.controller.deletion_blocker(body_id)
        if blocker is not None:
            self._refresh_body_list()
            self._set_error(blocker)
            return
        self.controller.delete_body(body_id)
        self._refresh_body_list()
        self._set_status("Deleted selected body.")

    def _on_add_body_clicked(self):
        pos_x = try_float(dpg.get_value(self.pos_x_id))
        pos_y = try_float(dpg.get_value(self.pos_y_id))
        vel_x = try_float(dpg.get_value(self.vel_x_id))
        vel_y = try_float(dpg.get_value(self.vel_y_id))
        radius = try_float(dpg.get_value(self.radius_id))
        mass = try_float(dpg.get_value(self.mass_id))
        if None in (pos_x, pos_y, vel_x, vel_y, radius, mass):
            self._set_error("Invalid numeric input.")
            return
        color_rgba = dpg.get_value(self.color_id)
        color = (int(color_rgba[0]), int(color_rgba[1]), int(color_rgba[2]))
        try:
            body = create_body((pos_x, pos_y), (vel_x, vel_y), radius, mass, color,
                               dpg.get_value(self.dynamic_id))
        except ValueError as exc:
            logger.warning("Rejected body from the add form: %s", exc)
            self._set_error(str(exc))
            return
        self.controller.add_body(body)
        self._refresh_body_list()
        self._set_status("Added body.")

    # -----------------------
    # Sync
    # -----------------------

    def _refresh_body_list(self):
        selected = self._selected_body_id()
        self._body_labels = {}
        for i, b in enumerate(self.controller.bodies):
            kind = "star" if i == 0 else ("body" if b.is_dynamic else "fixed")
            label = f"{i}: {kind} {b.id % 0x10000:04x}  r={b.radius}  m={b.mass:.1f}"
            self._body_labels[label] = b.id
        items = list(self._body_labels.keys())
        dpg.configure_item(self.body_list_id, items=items)
        for label, body_id in self._body_labels.items():
            if body_id == selected:
                dpg.set_value(self.body_list_id, label)
                break

    def _sync_ui_with_sim(self):
        """Reflect keyboard-driven changes from the viewport and refresh the body list."""
        ctl = self.controller
        dpg.set_value("state_text", f"{'Paused' if ctl.paused else 'Running'} - tick {ctl.sim.tick_count}")
        dpg.set_value("sim_speed_combo", str(ctl.sim_speed))
        dpg.set_value("move_speed_combo", f"{self.renderer.camera.move_speed:.0f}")
        dpg.set_value("orbits_checkbox", ctl.render_orbits)
        dpg.set_value("relative_checkbox", ctl.relative_orbits)
        if len(self._body_labels) != len(ctl.bodies):
            self._refresh_body_list()
