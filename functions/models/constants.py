import os
from enum import StrEnum

# Deployment settings
FUNCTIONS_REGION = os.environ.get("FUNCTIONS_REGION", "us-central1")
ORDER_NOTIFICATION_TOPIC = os.environ.get("ORDER_NOTIFICATION_TOPIC", "general")
MAX_INSTANCES = 10

# Firestore allows at most 500 writes per batch
MAX_BATCH_WRITES = 500

# Page size used when scanning Authentication accounts
LIST_USERS_PAGE_SIZE = 1000

MIN_PASSWORD_LENGTH = 6


# Collection names
class Collections(StrEnum):
    ORDERS = "orders"
    DRIVER_REQUESTS = "driver_requests"
    STORE_REVIEWS = "store_reviews"
    STORES = "stores"
    USERS = "users"
    ADMIN_NOTIFICATIONS = "admin_notifications"
    NOTIFICATIONS = "notifications"
    SYSTEM = "system"


# Document names
class Documents(StrEnum):
    SUPER_ADMIN_BOOTSTRAP = "superAdminBootstrap"


# Account roles, stored both in users documents and in custom claims
class Roles(StrEnum):
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"


# Custom claim keys
class ClaimFields(StrEnum):
    ROLE = "role"
    ADMIN = "admin"


# Field names for User documents
class UserFields(StrEnum):
    NAME = "name"
    EMAIL = "email"
    ROLE = "role"
    CREATED_BY = "createdBy"
    CREATED_AT = "createdAt"


# Field names for the bootstrap marker document
class BootstrapFields(StrEnum):
    USER_ID = "uid"
    CREATED_AT = "createdAt"


# Field names for Order documents
class OrderFields(StrEnum):
    PICKUP_OPTION = "pickupOption"
    DELIVERY_STATUS = "deliveryStatus"
    USER_NAME = "userName"


class PickupOptions(StrEnum):
    DELIVERY = "delivery"


class DeliveryStatus(StrEnum):
    PENDING = "pending"
    UPCOMING = "upcoming"


# Field names for DriverRequest documents
class DriverRequestFields(StrEnum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    STATUS = "status"


class DriverStatus(StrEnum):
    APPROVED = "approved"
    REJECTED = "rejected"
    PENDING = "pending"
    SUSPENDED = "suspended"


# Field names for admin Notification documents
class NotificationFields(StrEnum):
    TYPE = "type"
    TITLE = "title"
    TITLE_EN = "titleEn"
    MESSAGE = "message"
    MESSAGE_EN = "messageEn"
    ACTION_URL = "actionUrl"
    DATA = "data"
    PRIORITY = "priority"
    IS_READ = "isRead"
    CREATED_AT = "createdAt"
    RELATED_ID = "relatedId"


# Keys inside the notification data payload
class NotificationDataFields(StrEnum):
    DRIVER_ID = "driverId"
    DRIVER_NAME = "driverName"
    EMAIL = "email"
    STATUS = "status"
    ROUTE_LOCATION = "routeLocation"


class NotificationTypes(StrEnum):
    DRIVER = "driver"


class NotificationPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"


class ActionUrls(StrEnum):
    DRIVERS = "/drivers"
    HOME = "/home"


# Field names for Review documents
class ReviewFields(StrEnum):
    STORE_ID = "storeId"
    RATING = "rating"


# Field names for Store documents
class StoreFields(StrEnum):
    RATING = "rating"
    TOTAL_RATINGS = "totalRatings"
    UPDATED_AT = "updatedAt"


class QueryOperators(StrEnum):
    EQUALS = "=="
