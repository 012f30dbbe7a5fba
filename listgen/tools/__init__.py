"""
listgen tools package

Holds the external-backend adapters (see `listgen.tools.providers`). Core,
side-effect-free logic lives under `listgen.core`.
"""
