"""Services for the user service."""
