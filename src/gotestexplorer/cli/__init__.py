"""gtx command line interface."""
