"""
Petition Signatures - email-confirmed petition signing service.

Lets an organization publish petitions, collect signatures that are only
counted once the signer confirms by email, and lets petition authors view a
privacy-redacted list of their confirmed signers.

Core guarantees:
- A given email signs a given petition at most once
- A confirmation link confirms a signature at most once
- A petition's signature_count moves only with a confirmation, atomically
- Signer details are visible only to the petition's author, and only redacted
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
