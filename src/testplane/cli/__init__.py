"""testplane command line interface."""
