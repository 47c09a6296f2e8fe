"""Helper submodules for the Mentoria RW MasterClass landing page.

This package keeps the behaviour of the page out of the Streamlit scripts:
configuration, the webhook client that receives applications, the IBGE
municipality lookup used by the city autocomplete, and the ``form``
subpackage with the draft, validation and submission flow.
"""

__all__: list[str] = [
    "cities",
    "config",
    "form",
    "webhook",
]
