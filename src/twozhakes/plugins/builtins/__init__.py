"""Built-in plugins shipped with twozhakes."""
