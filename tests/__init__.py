"""Test suite package marker.

Package semantics give nested modules fully qualified names, so modules such
as ``tests.scoring.test_policy`` can never shadow a same-named top-level one.
"""
