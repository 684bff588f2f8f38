"""Adapters: concrete implementations of the core contracts.

- `peekanapp`: HTTP lookup client (httpx).
- `diagnostics`: logging-backed normalization reporter.
- `package_info`: local distribution metadata.
- `store_launcher`: opens store URLs on the host.
"""
