#!/usr/bin/env python3
# radarscope/examples/E030_sweep_and_commands.py

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from radarscope.simulation import RadarSimulation, ControllerCommands

def main():
    sim = RadarSimulation()
    commands = ControllerCommands(sim)
    plane = sim.add_aircraft("AWE456", 45.3, 9.4, 225, 16000, 160, "LIML", "M")

    for callsign, field, raw in [("AWE456", "heading", "300"), ("AWE456", "flight_level", "abc"),
                                 ("AWE456", "flight_level", "080"), ("XXX999", "speed", 200)]:
        response = commands.apply(callsign, field, raw)
        print(f"{callsign} {field}={raw!r}: {'OK' if response['success'] else 'REJECTED'} - {response['message']}")

    print("\nTrue position moves every frame, the displayed return only on a sweep:")
    now_ms = 0
    sim.tick(now_ms)
    for _ in range(10):
        now_ms += 500
        result = sim.tick(now_ms)
        marker = "SWEEP" if result.swept else "     "
        print(f"{now_ms:5d} ms {marker} true=({plane.lat:.5f}, {plane.lon:.5f}) "
              f"shown=({plane.display_x:6.1f}, {plane.display_y:6.1f}) hdg={plane.heading:5.1f}")

if __name__ == "__main__":
    main()
