from cfschema.adapter.connection import hb, memory, strategy
from cfschema.adapter.connection.strategy import create, open_connection
