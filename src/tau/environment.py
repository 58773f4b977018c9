# src/tau/environment.py
#
# A frame is shared by every closure created while it was active, so frames
# and the functions stored in them may reference each other in cycles. The
# garbage collector takes care of those; nothing here breaks them.


class Environment:
    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    def __repr__(self):
        return f"Environment(names={sorted(self.store)})"

    def define(self, name, value):
        """Bind ``name`` in this frame, overwriting any previous binding here."""
        self.store[name] = value
        return value

    def get(self, name, default=None):
        """Look ``name`` up in this frame, then in the enclosing ones."""
        if name in self.store:
            return self.store[name]
        if self.outer is not None:
            return self.outer.get(name, default)
        return default

    def assign(self, name, value):
        """Rebind an existing variable, searching outward by name.

        Returns False when no frame in the chain defines ``name``; the
        caller turns that into a runtime error.
        """
        if name in self.store:
            self.store[name] = value
            return True
        if self.outer is not None:
            return self.outer.assign(name, value)
        return False

    def ancestor(self, distance):
        environment = self
        for _ in range(distance):
            environment = environment.outer
        return environment

    def get_at(self, distance, name, default=None):
        return self.ancestor(distance).store.get(name, default)

    def assign_at(self, distance, name, value):
        self.ancestor(distance).store[name] = value
        return value
