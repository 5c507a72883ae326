import time
import dearpygui.dearpygui as dpg

import constants


def _make_callbacks(shared):
    def max_particles_cb(sender, app_data, user_data):
        shared['max_particles'] = int(app_data)
    def gravity_enabled_cb(sender, app_data, user_data):
        shared['gravity_enabled'] = bool(app_data)
    def gravity_cb(sender, app_data, user_data):
        try:
            shared['gravity_y'] = float(app_data)
        except (TypeError, ValueError):
            pass
    def drag_enabled_cb(sender, app_data, user_data):
        shared['drag_enabled'] = bool(app_data)
    def drag_cb(sender, app_data, user_data):
        try:
            shared['drag_damping'] = float(app_data)
        except (TypeError, ValueError):
            pass
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_world'] = True
    def spawn_cb():
        shared['spawn_emitter'] = True
    def exit_cb():
        shared['__exit__'] = True
    return max_particles_cb, gravity_enabled_cb, gravity_cb, drag_enabled_cb, drag_cb, pause_cb, reset_cb, spawn_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared` dict.
    """
    dpg.create_context()

    max_particles_cb, gravity_enabled_cb, gravity_cb, drag_enabled_cb, drag_cb, \
        pause_cb, reset_cb, spawn_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Simulation Controls", tag="controls_window", width=380, height=360):
        dpg.add_text("Population")
        dpg.add_slider_int(label="Max particles", tag="max_particles_slider",
                           default_value=int(shared.get('max_particles', constants.UI_MAX_PARTICLES)),
                           min_value=1, max_value=constants.UI_MAX_PARTICLES_LIMIT, callback=max_particles_cb)
        dpg.add_separator()
        dpg.add_text("Forces")
        dpg.add_checkbox(label="Gravity", tag="gravity_checkbox",
                         default_value=bool(shared.get('gravity_enabled', True)), callback=gravity_enabled_cb)
        dpg.add_input_float(label="Gravity (px/ms^2)", tag="gravity_input", format="%.7f", step=0.000005,
                            default_value=float(shared.get('gravity_y', 0.00001)), callback=gravity_cb)
        dpg.add_checkbox(label="Drag", tag="drag_checkbox",
                         default_value=bool(shared.get('drag_enabled', True)), callback=drag_enabled_cb)
        dpg.add_input_float(label="Damping", tag="drag_input", format="%.5f", step=0.0005,
                            default_value=float(shared.get('drag_damping', 0.001)), callback=drag_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Reset Simulation", callback=lambda s, a, u: reset_cb())
        dpg.add_button(label="Spawn Emitter", callback=lambda s, a, u: spawn_cb())
        dpg.add_button(label="Exit GUI", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Simulation Controls', width=400, height=400)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"particles={shared.get('particle_count', 0)}/{shared.get('max_particles', 0)}, "
                      f"emitters={shared.get('emitter_count', 0)}")
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    from particle_sim.controls import default_controls
    mgr = Manager()
    shared = mgr.dict(default_controls(constants.UI_MAX_PARTICLES))
    run_gui(shared)
