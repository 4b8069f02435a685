"""
Module containing utility functions for exporting merged outlines to a PostGIS database.

Note that psycopg2 must be installed in order to use the functions in this module. When installing using pip, ensure
that you do *NOT* use the binary distribution to avoid console warnings by passing the --no-binary option as follows:

pip install psycopg2 --no-binary=psycopg2

There are three ways of connecting to the database using this module:

(1) Initialize a connection pool by calling init_db_pool with the connection information. This allows using the other
    functions in this module without having to pass around connection info.
(2) Manually open the connection yourself, and pass in the connection object to the function.
(3) Pass in keyword arguments that can be used to establish the database connection.

Each export creates one row in the rectmerge table, and one row per boundary loop in the rectmerge_polygon table. Loops
are stored as PostGIS polygons (the ring is closed when written), so a union with several disjoint regions produces
several rows sharing the same rectmerge_id.
"""

import string
from importlib import resources
from typing import List
from .models import Polygon, orientation, signed_area

try:
    import psycopg2
    import psycopg2.pool
    from psycopg2.extras import DictCursor
except ImportError:
    raise RuntimeError("The following libraries are required to export merged outlines to PostGIS: psycopg2")

pool = None


def init_db_pool(*args, **kwargs):
    """
    Initializes a connection pool for database connections. This allows calling the other methods in this module without
    having to pass in connection info. This function accepts the same arguments as the psycopg2.connect function.
    """
    global pool
    pool = psycopg2.pool.SimpleConnectionPool(1, 20, *args, **kwargs)


def create_merge_tables(conn=None, schema: str = 'public', srid: int = 0, **kwargs):
    """
    Creates the necessary tables/indexes for storing merged outlines. This must be called prior to exporting.
    This method accepts either a connection object or keyword arguments for connecting to the database. Alternatively,
    init_db_pool may be called instead to initialize a connection pool, in which case there is no need to pass in
    database connection information.
    :param conn: psycopg2 connection (Optional).
    :param schema: Database schema (Optional, defaults to "public").
    :param srid: SRID of the geometry data (Optional, defaults to 0, which is no SRID).
    :param kwargs: Keyword arguments for establishing a database connection. These arguments will be passed to the
        psycopg2.connect function. (Optional)
    """
    _execute_template('create_merge_tables', conn, schema=schema, srid=srid, **kwargs)


def clear_merge_tables(conn=None, schema: str = 'public', **kwargs):
    """
    Truncates the merge tables to ensure they are empty.
    :param conn: psycopg2 connection (Optional).
    :param schema: Database schema (Optional, defaults to "public").
    :param kwargs: Keyword arguments for establishing a database connection. (Optional)
    """
    _execute_template('clear_merge_tables', conn, schema=schema, **kwargs)


def drop_merge_tables(conn=None, schema: str = 'public', **kwargs):
    """
    Drops the tables created by create_merge_tables.
    :param conn: psycopg2 connection (Optional).
    :param schema: Database schema (Optional, defaults to "public").
    :param kwargs: Keyword arguments for establishing a database connection. (Optional)
    """
    _execute_template('drop_merge_tables', conn, schema=schema, **kwargs)


def export_to_postgis(polygons: List[Polygon], conn=None, schema: str = 'public', srid: int = 0, name: str = None,
                      **kwargs) -> int:
    """
    Exports merged boundary loops to PostGIS, populating the rectmerge and rectmerge_polygon tables created by
    create_merge_tables (which must be called first). Returns the ID of the newly-created row in the rectmerge table.
    :param polygons: Boundary loops returned by merge_polygons.
    :param conn: psycopg2 connection (Optional).
    :param schema: Database schema (Optional, defaults to "public").
    :param srid: SRID of the geometry data (Optional, defaults to 0, which is no SRID).
    :param name: Optional label stored with the export.
    :param kwargs: Keyword arguments for establishing a database connection. (Optional)
    :return: ID of the newly-created row in the rectmerge table
    """
    close = None
    try:
        conn, close = _get_conn(conn, **kwargs)
        with conn.cursor(cursor_factory=DictCursor) as cursor:
            merge_id = _insert_merge(cursor, schema, name, len(polygons))
            for index, polygon in enumerate(polygons):
                _insert_polygon(cursor, schema, merge_id, index, polygon, srid)
        conn.commit()
        return merge_id
    finally:
        if close is not None:
            close(conn)


def polygon_to_wkt(polygon: Polygon) -> str:
    """Well-known text for a boundary loop. The first vertex is repeated to close the ring."""
    ring = polygon + polygon[:1]
    return 'POLYGON((' + ', '.join(f'{p.x!r} {p.y!r}' for p in ring) + '))'


def _execute_template(name, conn=None, **kwargs):
    params = {k: kwargs.pop(k) for k in ('schema', 'srid') if k in kwargs}
    close = None
    try:
        conn, close = _get_conn(conn, **kwargs)
        sql = _get_sql_from_template(name, **params)
        with conn.cursor(cursor_factory=DictCursor) as cursor:
            cursor.execute(sql)
        conn.commit()
    finally:
        if close is not None:
            close(conn)


def _get_conn(conn=None, **kwargs):
    if conn is not None:
        return conn, None
    if pool is not None:
        return pool.getconn(), _put_conn
    if not kwargs:
        raise RuntimeError("Exporting to PostGIS requires either passing a connection object, initializing a "
                           "connection pool, or providing keyword arguments that can be used to initalize a "
                           "connection. Please check the documentation for details.")
    return psycopg2.connect(**kwargs), _close_conn


def _put_conn(conn):
    if conn is not None:
        pool.putconn(conn)


def _close_conn(conn):
    if conn is not None:
        conn.close()


def _get_sql_from_template(name, **kwargs):
    s = resources.files('rectmerge').joinpath(f'sql/{name}.sql.template').read_text(encoding='utf-8')
    tpl = string.Template(s)
    return tpl.substitute(**kwargs)


def _insert_merge(cursor, schema: str, name: str, polygon_count: int) -> int:
    sql = _get_sql_from_template('insert_merge', schema=schema)
    cursor.execute(sql, {
        "name": name,
        "polygon_count": polygon_count
    })
    return cursor.fetchone()['id']


def _insert_polygon(cursor, schema: str, merge_id: int, index: int, polygon: Polygon, srid: int) -> int:
    sql = _get_sql_from_template('insert_polygon', schema=schema)
    cursor.execute(sql, {
        "rectmerge_id": merge_id,
        "loop_index": index,
        "vertex_count": len(polygon),
        "area": abs(signed_area(polygon)),
        "orientation": orientation(polygon).name,
        "wkt": polygon_to_wkt(polygon),
        "srid": srid
    })
    return cursor.fetchone()['id']
