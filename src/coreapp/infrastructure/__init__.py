"""Infrastructure - cross-cutting concerns such as logging."""
