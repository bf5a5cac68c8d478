"""Domain layer - catalog view-models and contracts.

The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: View-models built from catalog responses
- value_objects/: Validated request inputs
- enums/: Owner update methods and notification types
- errors/: Error types returned inside Failure results
- protocols/: Ports implemented by the infrastructure layer
"""
