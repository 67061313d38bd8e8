"""Feature modules (players, teams) exposing the service's inbound operations."""
