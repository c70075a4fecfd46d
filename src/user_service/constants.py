"""Global constants for the user service."""

# NATS subjects
SUBJECT_USER_CREATED = "user.created"

# Client-facing error messages
MSG_USER_NOT_FOUND = "User not found"
MSG_NAME_EMAIL_REQUIRED = "Name and email are required"
MSG_INVALID_BODY = "Invalid request body"
MSG_INTERNAL_ERROR = "Something went wrong!"
