#!/usr/bin/env python3

# Draws the three views for each preset stress state and prints the
# derived values.

# Written by the MohrView authors, 2026.

import matplotlib.pyplot as plt

from mohrview import Session
from mohrview.render import draw_primitives
from mohrview.structures import (PRESETS, element_geometry, element_primitives,
                                 map_circle_geometry, mohr_primitives,
                                 mohr_readout, sample_curve, curve_primitives)

# ----------------------------------------------------------------------

CURVE_SIZE, ELEMENT_SIZE, MOHR_SIZE = (720, 420), (360, 360), (900, 820)
θ = 25.0


def main():
    session = Session()
    for name in PRESETS:
        session.apply_preset(name)
        session.set_θ(θ)
        state = session.state
        d = session.derived()

        print(f"{name}: {state}")
        print(f"    σ_1 = {d.σ_1:.2f}, σ_2 = {d.σ_2:.2f}, "
              f"τ_max = {d.τ_max:.2f}, σ_avg = {d.σ_avg:.2f}")
        if d.θ_p1 is not None:
            print(f"    θ_p1 = {d.θ_p1:.2f}°, θ_p2 = {d.θ_p2:.2f}°")
        else:
            print("    Hydrostatic: every direction is principal.")

        geom = map_circle_geometry(state, session.θ, MOHR_SIZE)
        print(f"    {mohr_readout(geom).equation}")

        fig, (ax_el, ax_curve, ax_mohr) = plt.subplots(
            1, 3, figsize=(16, 5.5), width_ratios=(1, 2, 2))
        fig.suptitle(f"{name}  (θ = {session.θ:.1f}°)")

        el = element_geometry(state, session.θ, ELEMENT_SIZE)
        draw_primitives(ax_el, element_primitives(el, ELEMENT_SIZE),
                        size=ELEMENT_SIZE)

        sample = sample_curve(state, *session.θ_range)
        draw_primitives(ax_curve, curve_primitives(sample, CURVE_SIZE),
                        size=CURVE_SIZE)

        draw_primitives(ax_mohr, mohr_primitives(geom), size=MOHR_SIZE)

    plt.show()


if __name__ == '__main__':
    main()
