"""
Conexão com o banco de dados PostgreSQL

Every repository call opens its own connection through this module and
closes it when the statement finishes. There is no shared connection.
"""
import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    psycopg2 drops None-valued keywords, so settings that were not
    configured fall back to the libpq defaults (PGHOST, PGUSER, ...).

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError if the server can't be reached

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        try:
            cursor.execute("SELECT id, nome FROM clientes")
            rows = cursor.fetchall()  # list of dicts
        finally:
            cursor.close()
            conn.close()
    """
    params = settings.get_connection_params()
    logger.debug(f"Connecting to {params['host'] or 'localhost'}/{params['dbname'] or '-'}")
    return psycopg2.connect(cursor_factory=RealDictCursor, **params)
