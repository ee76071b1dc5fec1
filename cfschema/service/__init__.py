from cfschema.service.column_families import *
from cfschema.service.create_table import *
from cfschema.service.row import *
from cfschema.service.update import *
