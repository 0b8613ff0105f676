"""
Constants for the document-database REST API.

Header names, resource type discriminators and feed envelope keys.

Author: Cosmoskit Team
Date: 2026-10-18
"""

API_VERSION = "2018-12-31"
SDK_NAME = "cosmoskit"
SDK_VERSION = "0.1.0"


class HttpHeaders:
    """Request and response header names."""

    ACCEPT = "Accept"
    AUTHORIZATION = "authorization"
    CONTENT_TYPE = "Content-Type"
    USER_AGENT = "User-Agent"
    IF_MATCH = "If-Match"
    IF_NONE_MATCH = "If-None-Match"
    ETAG = "etag"

    VERSION = "x-ms-version"
    DATE = "x-ms-date"
    ACTIVITY_ID = "x-ms-activity-id"
    CONSISTENCY_LEVEL = "x-ms-consistency-level"
    SESSION_TOKEN = "x-ms-session-token"
    CONTINUATION = "x-ms-continuation"
    MAX_ITEM_COUNT = "x-ms-max-item-count"
    REQUEST_CHARGE = "x-ms-request-charge"
    RETRY_AFTER_MS = "x-ms-retry-after-ms"
    SUB_STATUS = "x-ms-substatus"
    OFFER_THROUGHPUT = "x-ms-offer-throughput"
    PARTITION_KEY = "x-ms-documentdb-partitionkey"
    IS_UPSERT = "x-ms-documentdb-is-upsert"
    IS_QUERY = "x-ms-documentdb-isquery"
    ENABLE_CROSS_PARTITION_QUERY = "x-ms-documentdb-query-enablecrosspartition"
    POPULATE_QUERY_METRICS = "x-ms-documentdb-populatequerymetrics"
    PRE_TRIGGER_INCLUDE = "x-ms-documentdb-pre-trigger-include"
    POST_TRIGGER_INCLUDE = "x-ms-documentdb-post-trigger-include"
    ENABLE_SCRIPT_LOGGING = "x-ms-documentdb-script-enable-logging"


class MediaTypes:
    JSON = "application/json"
    QUERY_JSON = "application/query+json"


class ResourceType:
    """Path segments used as resource-kind discriminators."""

    DATABASE = "dbs"
    CONTAINER = "colls"
    ITEM = "docs"
    USER_DEFINED_FUNCTION = "udfs"
    STORED_PROCEDURE = "sprocs"
    TRIGGER = "triggers"


# Key holding the resource list in a feed response body.
FEED_ENVELOPE_KEYS = {
    ResourceType.DATABASE: "Databases",
    ResourceType.CONTAINER: "DocumentCollections",
    ResourceType.ITEM: "Documents",
    ResourceType.USER_DEFINED_FUNCTION: "UserDefinedFunctions",
    ResourceType.STORED_PROCEDURE: "StoredProcedures",
    ResourceType.TRIGGER: "Triggers",
}
