"""Route modules registered on the shared Greeter application."""
