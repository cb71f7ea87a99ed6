"""
Application layer.

Sits between the transport and the storage technology:
- storage: the driver contract, tagged storage outcomes and the facade
- handler: maps storage outcomes to response envelopes
"""
