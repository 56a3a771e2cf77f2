"""Runtime layer: transport, requests and execution."""
