#!/usr/bin/env python3
# radarscope/examples/E001_projection.py

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).parent.parent))

from radarscope.projection import GeoBounds, GeoProjection

def main():
    bounds = GeoBounds.from_center(45.44944444, 9.27833333, 30)
    projection = GeoProjection(bounds, 800, 800)
    print(projection)
    print(f"Scale: {projection.km_per_pixel:.4f} km/px")

    for name, lat, lon in [("LIML", 45.445, 9.277), ("LIMC", 45.630, 8.723), ("SRN VOR", 45.646, 9.021)]:
        x, y = projection.to_pixel(lat, lon)
        back_lat, back_lon = projection.to_geo(x, y)
        inside = "inside" if bounds.contains(lat, lon) else "outside"
        print(f"{name:<8} ({lat:.3f}, {lon:.3f}) -> ({x:7.1f}, {y:7.1f}) px -> ({back_lat:.6f}, {back_lon:.6f}) [{inside}]")

if __name__ == "__main__":
    main()
