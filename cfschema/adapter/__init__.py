from cfschema.adapter import config, connection, fs, store_client
from cfschema.adapter.store_client import StoreClient
