"""Frontend - parses JavaScript and reads function declarations."""
