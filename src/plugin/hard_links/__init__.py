"""Hard-link bounded context.

Maintains groups of logical paths sharing one physical payload: creating
links, propagating payload moves to every member, and guarding deletion so
a shared payload survives until its last member is removed.
"""
