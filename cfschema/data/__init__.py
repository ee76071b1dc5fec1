from cfschema.data.api import *
from cfschema.data.column import *
from cfschema.data.config import *
from cfschema.data.data_type import *
from cfschema.data.error import *
from cfschema.data.row import *
from cfschema.data.schema import *
from cfschema.data.store_config import *
from cfschema.data.store_connection import *
from cfschema.data.table import *
