"""Form Session - wires form input to the Validator and Record Store."""

from studentform.form.session import DUPLICATE_ID_MESSAGE, FormSession

__all__ = ["DUPLICATE_ID_MESSAGE", "FormSession"]
