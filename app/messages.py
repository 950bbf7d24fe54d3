"""
Response message catalog.
Every JSON body returned by the food endpoints carries one of these strings
under the "message" key.
"""


class SuccessMessages:
    """Messages for 2xx responses"""

    POST = "Food created successfully"
    GET_ALL = "Foods fetched successfully"
    GET = "Food fetched successfully"
    PUT = "Food updated successfully"
    DELETE = "Food deleted successfully"


class ErrorMessages:
    """Messages for 4xx/5xx responses"""

    REQ_BODY = "Invalid request body"
    REQ_QUERIES = "Invalid request query parameters"
    REQ_PARAMS = "Invalid request path parameters"
    NOT_FOUND = "Food not found"
    INTERNAL = "An unexpected error occurred"
