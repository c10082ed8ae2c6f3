# radarscope/run_radar.py
"""
Live radar scope for the Milan terminal area.

Usage: python run_radar.py [config.json]

Hover over a target to expand its data tag; click a target to rotate its tag.
"""
import os
import sys
import time
import math
import logging

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from radarscope.simulation import RadarSimulation, SimulationConfig, ControllerCommands
from radarscope.visualization import RadarPlotter

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

FRAME_INTERVAL_MS = 50
TARGET_HIT_RADIUS_PX = 15

class LiveScope:
    """Drives the simulation from matplotlib's animation timer."""

    def __init__(self, config: SimulationConfig):
        self.sim = RadarSimulation(config)
        if config.navdb_path:
            self.sim.load_navigation_from_db()
        self.commands = ControllerCommands(self.sim)
        self.plotter = RadarPlotter(config.canvas_width, config.canvas_height)
        self.plotter.fig.canvas.manager.set_window_title('radarscope')
        self.hovered = None

        self._spawn_initial_traffic()
        self.plotter.fig.canvas.mpl_connect('motion_notify_event', self.on_motion)
        self.plotter.fig.canvas.mpl_connect('button_press_event', self.on_click)

    def _spawn_initial_traffic(self):
        proj = self.sim.projection
        lat1, lon1 = proj.to_geo(proj.width * 0.125, proj.height * 0.125)
        lat2, lon2 = proj.to_geo(proj.width * 0.875, proj.height * 0.75)
        self.sim.add_aircraft("BAW123", lat1, lon1, 135, 18000, 230, "LIMC", "M")
        self.sim.add_aircraft("AWE456", lat2, lon2, 225, 16000, 160, "LIML", "M")

        # A couple of standing clearances so the scope is not static
        self.commands.set_flight_level("BAW123", 120)
        self.commands.set_heading("AWE456", 270)
        self.commands.set_speed("AWE456", 210)

    def _target_at(self, x, y):
        for aircraft in self.sim.aircraft.values():
            if aircraft.display_x is None:
                continue
            if math.hypot(aircraft.display_x - x, aircraft.display_y - y) < TARGET_HIT_RADIUS_PX:
                return aircraft.callsign
        return None

    def on_motion(self, event):
        if event.inaxes is self.plotter.ax and event.xdata is not None:
            self.hovered = self._target_at(event.xdata, event.ydata)

    def on_click(self, event):
        if event.inaxes is not self.plotter.ax or event.xdata is None:
            return
        callsign = self._target_at(event.xdata, event.ydata)
        if callsign:
            self.commands.rotate_tag(callsign)

    def update_frame(self, frame):
        self.sim.tick(time.monotonic() * 1000)
        return self.plotter.draw(self.sim.scene(self.hovered))

def main():
    config = SimulationConfig.from_json(sys.argv[1]) if len(sys.argv) > 1 else SimulationConfig()
    scope = LiveScope(config)
    ani = FuncAnimation(scope.plotter.fig, scope.update_frame, interval=FRAME_INTERVAL_MS, cache_frame_data=False)
    plt.tight_layout()
    plt.show()

if __name__ == "__main__":
    main()
