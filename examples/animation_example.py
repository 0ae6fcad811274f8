#!/usr/bin/env python3

# Live views driven by matplotlib timers.  Drag the element diagram
# left / right to rotate it, scroll over the circle to zoom, drag the
# circle with the right button to pan, double click to reset the view
# and press 1-5 to load a preset.

# Written by the MohrView authors, 2026.

import logging

import matplotlib.pyplot as plt

from mohrview import Session
from mohrview.animation import CircleView, CurveView, OrientationView
from mohrview.render import draw_primitives
from mohrview.structures import PRESETS, map_circle_geometry, mohr_markers

# ----------------------------------------------------------------------

CURVE_SIZE, ELEMENT_SIZE, MOHR_SIZE = (720, 420), (360, 360), (900, 820)
FRAME_MS = 16


class TimerScheduler:
    """Host frame scheduler built from single shot matplotlib timers."""

    def __init__(self, fig, interval: int = FRAME_MS):
        self.fig = fig
        self.interval = interval
        self._timers = {}
        self._next_handle = 0

    def request(self, callback):
        self._next_handle += 1
        handle = self._next_handle

        def fire():
            self._timers.pop(handle, None)
            callback()

        timer = self.fig.canvas.new_timer(interval=self.interval)
        timer.single_shot = True
        timer.add_callback(fire)
        self._timers[handle] = timer
        timer.start()
        return handle

    def cancel(self, handle):
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()


def painter(fig, ax, size):
    def paint(prims):
        ax.clear()
        draw_primitives(ax, prims, size=size)
        fig.canvas.draw_idle()

    return paint


def main():
    logging.basicConfig(level=logging.INFO)

    session = Session()
    fig, (ax_el, ax_curve, ax_mohr) = plt.subplots(
        1, 3, figsize=(16, 5.5), width_ratios=(1, 2, 2))
    sched = TimerScheduler(fig)

    curve = CurveView(session.state, *session.θ_range, size=CURVE_SIZE)
    orient = OrientationView(session.state, session.θ, size=ELEMENT_SIZE)
    circle = CircleView(session.state, session.θ, size=MOHR_SIZE)
    controller = circle.controller

    curve.add_paint_callback(painter(fig, ax_curve, CURVE_SIZE))
    orient.add_paint_callback(painter(fig, ax_el, ELEMENT_SIZE))
    paint_circle = painter(fig, ax_mohr, MOHR_SIZE)

    def redraw_circle(*_):
        paint_circle(circle.primitives())

    def on_change(sess):
        curve.set_target(sess.state)
        curve.set_range(*sess.θ_range)
        orient.set_state(sess.state)
        orient.set_target(sess.θ)
        circle.state, circle.θ = sess.state, sess.θ
        redraw_circle()

    session.add_change_callback(on_change)
    controller.add_rotate_callback(session.set_θ)
    controller.add_hover_callback(redraw_circle)

    # -- Pointer Events ------------------------------------------------

    def on_press(event):
        if event.inaxes is ax_el and event.button == 1:
            controller.begin_rotate(event.x, session.θ)
        elif event.inaxes is ax_mohr and event.dblclick:
            controller.double_click()
            redraw_circle()
        elif event.inaxes is ax_mohr and event.button == 3:
            controller.begin_pan(event.x, -event.y)

    def hovered_key(event):
        # Display → data (displayed surface) → unzoomed surface.
        p = ax_mohr.transData.inverted().transform((event.x, event.y))
        x, y = controller.viewport.inverse_point(tuple(p))
        geom = map_circle_geometry(circle.state, circle.θ, MOHR_SIZE)
        for marker in reversed(mohr_markers(geom, circle.visibility)):
            mx, my = marker.position
            if (x - mx) ** 2 + (y - my) ** 2 <= (marker.radius + 4) ** 2:
                return marker.key
        return None

    def on_motion(event):
        if controller.drag(event.x) is None:
            controller.move(event.x, -event.y)
            if controller.viewport.panning:
                redraw_circle()
            elif event.inaxes is ax_mohr:
                controller.set_hover(hovered_key(event))

    def on_release(_):
        controller.release()

    def on_scroll(event):
        if event.inaxes is ax_mohr:
            controller.wheel(-1 if event.button == 'up' else +1)
            redraw_circle()

    def on_key(event):
        names = list(PRESETS)
        if event.key and event.key.isdigit() and 1 <= int(event.key) <= \
                len(names):
            session.apply_preset(names[int(event.key) - 1])

    fig.canvas.mpl_connect('button_press_event', on_press)
    fig.canvas.mpl_connect('motion_notify_event', on_motion)
    fig.canvas.mpl_connect('button_release_event', on_release)
    fig.canvas.mpl_connect('scroll_event', on_scroll)
    fig.canvas.mpl_connect('key_press_event', on_key)

    curve.attach(sched.request, sched.cancel)
    orient.attach(sched.request, sched.cancel)
    redraw_circle()
    plt.show()


if __name__ == '__main__':
    main()
