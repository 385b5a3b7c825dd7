class DomainException(Exception):
    """Base exception for all domain errors"""
    pass

class InvalidOfferError(DomainException):
    """Raised when an offer is constructed with impossible values"""
    pass

class UnknownMintPresetError(DomainException):
    """Raised when a mint-value preset name is not recognised"""
    pass

class ChainNotFoundError(DomainException):
    """Raised when a stored chain cannot be found"""
    pass

class ScenarioError(DomainException):
    """Raised when a scenario definition cannot be loaded"""
    pass
