"""bytelens view - stream chunking, row rendering and the `blens` CLI."""
