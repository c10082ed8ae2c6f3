#!/usr/bin/env python3
# radarscope/examples/E010_kinematics.py

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from radarscope.aircraft import Aircraft, build_tag_lines

def main():
    aircraft = Aircraft("BAW123", 45.5, 9.2, 350, 17990, 230, "LIMC", "M")
    aircraft.set_heading_target(10)
    aircraft.set_altitude_target(18000)
    aircraft.set_speed_target(250)

    print("Turning 350 -> 010 through north, levelling at FL180, accelerating to 250 kt")
    for second in range(1, 13):
        aircraft.update(1.0)
        print(f"t={second:2d}s hdg={aircraft.heading:5.1f} ({aircraft.heading_state.value:9}) "
              f"alt={aircraft.altitude:7.1f} spd={aircraft.speed:5.1f} vs={aircraft.vertical_speed:+6.0f}")

    print("\nData tag:")
    for line in build_tag_lines(aircraft, hovered=True):
        print(f"  {line}")

if __name__ == "__main__":
    main()
