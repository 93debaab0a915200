# -*- coding: utf-8 -*-
"""
Text processing stages of the semantic chunker.
"""
