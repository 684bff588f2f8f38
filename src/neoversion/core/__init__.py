"""Core of neoversion: domain, contracts, version logic and resolution.

Nothing in here renders anything or knows about terminals.
"""
