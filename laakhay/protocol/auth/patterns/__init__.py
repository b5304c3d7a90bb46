"""Auth strategy implementations, one module per handshake scheme."""

from .direct_hmac_expiry import DirectHmacExpiry
from .inline_subscribe import InlineSubscribe
from .iso_passphrase import IsoPassphrase
from .jsonrpc_linebreak import JsonRpcLinebreak
from .listen_key import ListenKey
from .rest_token import RestToken
from .sha384_nonce import Sha384Nonce
from .sha512_newline import Sha512Newline

__all__ = [
    "DirectHmacExpiry",
    "InlineSubscribe",
    "IsoPassphrase",
    "JsonRpcLinebreak",
    "ListenKey",
    "RestToken",
    "Sha384Nonce",
    "Sha512Newline",
]
