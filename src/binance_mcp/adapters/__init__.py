"""
============================

Exchange Client Adapters.

============================

This package contains adapter implementations for exchange REST clients.
Adapters wrap a third-party client library and implement the protocol
interfaces defined in the protocols package.

"""
