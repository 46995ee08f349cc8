class CollaboratorError(RuntimeError):
    """Raised when an external collaborator (catalog, persistence, messaging) fails."""
    pass


class CatalogError(CollaboratorError):
    """Raised when services or barbers cannot be looked up."""
    pass


class AppointmentPersistenceError(CollaboratorError):
    """Raised when an appointment cannot be stored."""
    pass


class MessageDeliveryError(CollaboratorError):
    """Raised when an outbound chat message cannot be delivered."""
    pass
