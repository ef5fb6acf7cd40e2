"""Infrastructure: element data, file readers and command history."""
