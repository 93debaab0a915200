# -*- coding: utf-8 -*-
"""
Shared building blocks: configuration, logging, data structures, errors,
ID generation, numeric helpers and the embedding adapter.
"""
