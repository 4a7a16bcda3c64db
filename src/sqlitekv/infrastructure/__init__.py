"""Infrastructure components: persistent storage engines."""
