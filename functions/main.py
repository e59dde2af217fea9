# Firebase discovers deployed functions from the names exported here

import firebase_admin
from firebase_functions import options
from models.constants import FUNCTIONS_REGION, MAX_INSTANCES

if not firebase_admin._apps:
    firebase_admin.initialize_app()

options.set_global_options(region=FUNCTIONS_REGION, max_instances=MAX_INSTANCES)

# Import and re-export the Firestore trigger functions
from triggers import (  # noqa: E402
    process_driver_request_creation,
    process_driver_request_update,
    process_review_write,
    senddevices,
)

# Import and re-export the callable functions
from callables import bootstrapSuperAdmin, createAdmin, deleteAdmin  # noqa: E402

__all__ = [
    "senddevices",
    "process_driver_request_creation",
    "process_driver_request_update",
    "process_review_write",
    "createAdmin",
    "deleteAdmin",
    "bootstrapSuperAdmin",
]
