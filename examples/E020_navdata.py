#!/usr/bin/env python3
# radarscope/examples/E020_navdata.py

from pathlib import Path
import sys
import logging

sys.path.append(str(Path(__file__).parent.parent))

from radarscope.navdata import NavDatabaseLoader
from radarscope.nav_geometry import NavGeometryResolver
from radarscope.simulation import SimulationConfig
from radarscope.projection import GeoProjection

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

def main():
    db_path = sys.argv[1] if len(sys.argv) > 1 else str(Path(__file__).parent.parent / "NavData" / "navdb.s3db")
    config = SimulationConfig(navdb_path=db_path)
    bounds = config.build_bounds()

    dataset = NavDatabaseLoader(db_path).load(bounds)
    print(f"Dataset: {dataset.summary()}")
    if not dataset.is_loaded:
        print(f"Navigation data unavailable: {dataset.error}")
        return

    resolver = NavGeometryResolver(GeoProjection(bounds, 800, 800), config.active_airports)
    geometry = resolver.resolve(dataset)
    for runway in geometry.runways:
        source = f"paired with {runway.reciprocal_id}" if runway.reciprocal_id else "length/bearing fallback"
        print(f"Runway {runway.airport_id} {runway.runway_id}: {source}")
    for localizer in geometry.localizers:
        fix = localizer.initial_fix or "15 NM fallback"
        print(f"Localizer {localizer.airport_id} {localizer.runway_id}: {localizer.length_km:.1f} km ({fix})")

if __name__ == "__main__":
    main()
