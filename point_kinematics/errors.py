"""
Errors raised by the kinematics evaluator and the trajectory sampler.

DomainError:      a formula precondition is violated (negative radicand,
                  zero speed, zero normal acceleration, ...).
ComputationError: a derived quantity is degenerate (zero-extent trajectory,
                  w**2 < wt**2, no sample near the highlighted instant).
"""


class KinematicsError(Exception):
    """Base error; remembers which quantity failed and at which t."""

    def __init__(self, message, quantity=None, t=None):
        super().__init__(message)
        self.quantity = quantity
        self.t = t

    def __str__(self):
        message = super().__str__()
        if self.quantity is None:
            return message
        if self.t is None:
            return f"{self.quantity}: {message}"
        return f"{self.quantity} at t={self.t:g}: {message}"


class DomainError(KinematicsError):
    pass


class ComputationError(KinematicsError):
    pass
