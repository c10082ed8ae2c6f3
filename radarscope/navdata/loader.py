# radarscope/navdata/loader.py
"""
Loads navigation records from a Navigraph-style SQLite database for the
simulated bounding box.

A failed load never stops the simulation: load() logs the problem and returns
an UNAVAILABLE dataset, so aircraft keep flying over an empty map.
"""
import os
import sqlite3
import logging
from typing import Callable, List, Optional, Sequence

from ..projection.data_models import GeoBounds
from .data_models import (
    NavigationDataset, Waypoint, TerminalWaypoint, Airport, Vor, Runway, Ils, ApproachLeg
)
from .exceptions import DataProviderUnavailable

class NavDatabaseLoader:
    """Extracts waypoints, airports, navaids, runways, ILS and approaches from navdb.s3db."""

    ENROUTE_WAYPOINTS_SQL = """
        SELECT waypoint_identifier, waypoint_type, waypoint_latitude, waypoint_longitude
        FROM tbl_enroute_waypoints
        WHERE waypoint_longitude BETWEEN :min_lon AND :max_lon
          AND waypoint_latitude BETWEEN :min_lat AND :max_lat
          AND waypoint_identifier NOT LIKE 'VP%' AND waypoint_type != 'U'
    """
    AIRPORTS_SQL = """
        SELECT airport_identifier, airport_name, airport_ref_latitude, airport_ref_longitude,
               elevation, transition_altitude, transition_level
        FROM tbl_airports
        WHERE airport_ref_longitude BETWEEN :min_lon AND :max_lon
          AND airport_ref_latitude BETWEEN :min_lat AND :max_lat
          AND ifr_capability = 'Y'
    """
    VORS_SQL = """
        SELECT vor_identifier, vor_name, navaid_class, vor_latitude, vor_longitude
        FROM tbl_vhfnavaids
        WHERE vor_longitude BETWEEN :min_lon AND :max_lon
          AND vor_latitude BETWEEN :min_lat AND :max_lat
          AND navaid_class LIKE 'V%'
    """
    TERMINAL_WAYPOINTS_SQL = """
        SELECT waypoint_identifier, region_code, waypoint_type, waypoint_latitude, waypoint_longitude
        FROM tbl_terminal_waypoints
        WHERE waypoint_longitude BETWEEN :min_lon AND :max_lon
          AND waypoint_latitude BETWEEN :min_lat AND :max_lat
          AND waypoint_identifier NOT LIKE 'VP%'
    """
    RUNWAYS_SQL = """
        SELECT runway_identifier, airport_identifier, runway_latitude, runway_longitude,
               runway_length, runway_true_bearing, runway_magnetic_bearing, runway_width,
               landing_threshold_elevation
        FROM tbl_runways
        WHERE runway_longitude BETWEEN :min_lon AND :max_lon
          AND runway_latitude BETWEEN :min_lat AND :max_lat
    """
    ILS_SQL = """
        SELECT airport_identifier, runway_identifier, llz_identifier, llz_latitude, llz_longitude,
               llz_bearing, station_declination, ils_mls_gls_category
        FROM tbl_localizers_glideslopes
        WHERE llz_longitude BETWEEN :min_lon AND :max_lon
          AND llz_latitude BETWEEN :min_lat AND :max_lat
    """
    APPROACHES_SQL = """
        SELECT airport_identifier, procedure_identifier, route_type, transition_identifier, seqno,
               waypoint_identifier, waypoint_latitude, waypoint_longitude, waypoint_description_code
        FROM tbl_iaps
        WHERE airport_identifier IN ({placeholders})
        ORDER BY airport_identifier, procedure_identifier, transition_identifier, seqno
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.info(f"NavDatabaseLoader initialized. Path: {self.db_path}")

    def load(self, bounds: GeoBounds) -> NavigationDataset:
        """Loads every record inside the bounds; returns an UNAVAILABLE dataset on failure."""
        try:
            return self.load_or_raise(bounds)
        except DataProviderUnavailable as e:
            logging.error(f"Navigation data load failed, continuing without map data: {e}")
            return NavigationDataset.unavailable(str(e))

    def load_or_raise(self, bounds: GeoBounds) -> NavigationDataset:
        if not os.path.exists(self.db_path):
            raise DataProviderUnavailable(self.db_path, "Navigation database not found")

        box = {
            'min_lat': bounds.min_lat, 'max_lat': bounds.max_lat,
            'min_lon': bounds.min_lon, 'max_lon': bounds.max_lon
        }
        try:
            connection = sqlite3.connect(f"file:{self.db_path}?mode=ro", uri=True)
        except sqlite3.Error as e:
            raise DataProviderUnavailable(self.db_path, f"Cannot open navigation database ({e})") from e

        try:
            connection.row_factory = sqlite3.Row
            airports = self._query(connection, self.AIRPORTS_SQL, box, self._to_airport)
            dataset = NavigationDataset.loaded(
                waypoints=self._query(connection, self.ENROUTE_WAYPOINTS_SQL, box, self._to_waypoint),
                terminal_waypoints=self._query(connection, self.TERMINAL_WAYPOINTS_SQL, box, self._to_terminal_waypoint),
                airports=airports,
                vors=self._query(connection, self.VORS_SQL, box, self._to_vor),
                runways=self._query(connection, self.RUNWAYS_SQL, box, self._to_runway),
                ils=self._query(connection, self.ILS_SQL, box, self._to_ils),
                approach_legs=self._load_approach_legs(connection, [a.icao for a in airports])
            )
        except sqlite3.Error as e:
            raise DataProviderUnavailable(self.db_path, f"Query failed ({e})") from e
        finally:
            connection.close()

        logging.info(f"Loaded navigation data: {dataset.summary()}")
        return dataset

    def _load_approach_legs(self, connection: sqlite3.Connection, icao_codes: Sequence[str]) -> List[ApproachLeg]:
        """Approach procedures are only fetched for the airports inside the bounds."""
        if not icao_codes:
            return []
        sql = self.APPROACHES_SQL.format(placeholders=", ".join("?" for _ in icao_codes))
        return self._query(connection, sql, list(icao_codes), self._to_approach_leg)

    def _query(self, connection: sqlite3.Connection, sql: str, params, mapper: Callable) -> List:
        records = []
        for row in connection.execute(sql, params):
            record = mapper(row)
            if record is not None:
                records.append(record)
        return records

    # --- Row mappers. Rows with unusable coordinates are skipped. ---

    @staticmethod
    def _to_waypoint(row: sqlite3.Row) -> Optional[Waypoint]:
        try:
            return Waypoint(name=row['waypoint_identifier'], type_code=row['waypoint_type'] or '',
                            lat=float(row['waypoint_latitude']), lon=float(row['waypoint_longitude']))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_terminal_waypoint(row: sqlite3.Row) -> Optional[TerminalWaypoint]:
        try:
            return TerminalWaypoint(name=row['waypoint_identifier'], airport_id=row['region_code'],
                                    type_code=row['waypoint_type'] or '',
                                    lat=float(row['waypoint_latitude']), lon=float(row['waypoint_longitude']))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_airport(row: sqlite3.Row) -> Optional[Airport]:
        try:
            return Airport(icao=row['airport_identifier'], name=row['airport_name'] or '',
                           lat=float(row['airport_ref_latitude']), lon=float(row['airport_ref_longitude']),
                           elevation_ft=row['elevation'],
                           transition_altitude_ft=row['transition_altitude'],
                           transition_level_ft=row['transition_level'])
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_vor(row: sqlite3.Row) -> Optional[Vor]:
        try:
            return Vor(ident=row['vor_identifier'], name=row['vor_name'] or '', type_code=row['navaid_class'] or '',
                       lat=float(row['vor_latitude']), lon=float(row['vor_longitude']))
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_runway(row: sqlite3.Row) -> Optional[Runway]:
        try:
            return Runway(id=row['runway_identifier'], airport_id=row['airport_identifier'],
                          lat=float(row['runway_latitude']), lon=float(row['runway_longitude']),
                          length_ft=float(row['runway_length']), true_bearing=float(row['runway_true_bearing']),
                          magnetic_bearing=row['runway_magnetic_bearing'], width_ft=row['runway_width'],
                          threshold_elevation_ft=row['landing_threshold_elevation'])
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_ils(row: sqlite3.Row) -> Optional[Ils]:
        try:
            return Ils(airport_id=row['airport_identifier'], runway_id=row['runway_identifier'],
                       magnetic_bearing=float(row['llz_bearing']), declination=float(row['station_declination'] or 0.0),
                       ident=row['llz_identifier'], lat=row['llz_latitude'], lon=row['llz_longitude'],
                       category=row['ils_mls_gls_category'])
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_approach_leg(row: sqlite3.Row) -> Optional[ApproachLeg]:
        # Legs without a fix (e.g. heading-to-altitude legs) carry no coordinates
        if row['waypoint_identifier'] is None or row['waypoint_latitude'] is None:
            return None
        try:
            return ApproachLeg(airport_id=row['airport_identifier'], approach_id=row['procedure_identifier'],
                               waypoint_id=row['waypoint_identifier'],
                               waypoint_type_code=row['waypoint_description_code'] or '',
                               lat=float(row['waypoint_latitude']), lon=float(row['waypoint_longitude']),
                               seqno=row['seqno'], route_type=row['route_type'],
                               transition_id=row['transition_identifier'])
        except (TypeError, ValueError):
            return None
