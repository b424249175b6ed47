"""Adapters implementing the ports with local subprocesses."""
