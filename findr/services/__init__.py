"""Services used by the findr TUI."""
