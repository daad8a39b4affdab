"""
Test suites package.

Kept importable so the unit fakes (`testsuites.unit.fake_browser`) and the
UI fixtures can be shared by module path.
"""
