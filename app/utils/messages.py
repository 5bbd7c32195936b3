"""Message constants for the application."""


class FlashMessages:
    """Container for flash message constants."""

    # Authentication messages
    LOGIN_SUCCESS = "Login successful!"
    LOGIN_ERROR = "Invalid username or password"
    LOGOUT_SUCCESS = "You have been logged out."
    ADMIN_REQUIRED = "You do not have permission to access this page."

    # Category messages
    CATEGORY_ADDED = "Category created successfully!"
    CATEGORY_UPDATED = "Category updated successfully!"
    CATEGORY_DELETED = "Category deleted successfully."
    CATEGORY_NOT_FOUND = "Category not found."
    CATEGORY_SAVE_ERROR = "Error saving category"
    CATEGORY_DELETE_ERROR = "An error occurred while deleting the category."

    # General messages
    ERROR = "An error occurred. Please try again."
