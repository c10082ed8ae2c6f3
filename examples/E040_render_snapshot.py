#!/usr/bin/env python3
# radarscope/examples/E040_render_snapshot.py

from pathlib import Path
import sys

import matplotlib
matplotlib.use('Agg')

sys.path.append(str(Path(__file__).parent.parent))

from radarscope.navdata import NavigationDataset, Runway, Ils, Waypoint, Vor, ApproachLeg
from radarscope.simulation import RadarSimulation
from radarscope.visualization import RadarPlotter

def main():
    # A hand-made dataset so the example runs without a navigation database
    dataset = NavigationDataset.loaded(
        runways=[
            Runway("RW35", "LIML", 45.4275, 9.2806, 8000, 357.9),
            Runway("RW17", "LIML", 45.4625, 9.2786, 8000, 177.9),
        ],
        ils=[Ils("LIML", "RW35", 355.0, 2.9)],
        approach_legs=[
            ApproachLeg("LIML", "I35", "VAVER", "E  A", 45.19, 9.30),
            ApproachLeg("LIML", "I35-Y", "VAVER", "E  A", 45.19, 9.30),
        ],
        waypoints=[Waypoint("ROKAR", "C", 45.60, 9.10), Waypoint("SARON", "W", 45.30, 9.50)],
        vors=[Vor("LIN", "LINATE", "VD", 45.43, 9.27)]
    )
    sim = RadarSimulation(dataset=dataset)
    sim.add_aircraft("BAW123", 45.70, 8.90, 135, 18000, 230, "LIMC", "M")
    sim.add_aircraft("AWE456", 45.25, 9.55, 315, 9000, 210, "LIML", "M")

    plotter = RadarPlotter(sim.projection.width, sim.projection.height)
    plotter.draw(sim.scene(hovered="AWE456"))
    output = Path(__file__).parent / "radar_snapshot.png"
    plotter.save(str(output))
    print(f"Snapshot written to {output}")

if __name__ == "__main__":
    main()
