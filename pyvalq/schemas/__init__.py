"""Document schemas for pyvalq.

This package contains the schemas the command-line tool can validate against.
They are discovered dynamically by `pyvalq.core.runner`. Each module in this
package should contain one or more classes that inherit from
`pyvalq.core.base_schema.BaseSchema`.
"""
