#!/usr/bin/env python3
"""Example: digests of the EIP-712 Mail example, then Safe message and transaction hashes."""

from typedhash import SafeTransaction, convert_document, safe_message_hashes, safe_tx_hashes

document = convert_document(
    {
        "domain": {
            "name": "Ether Mail",
            "version": "1",
            "chainId": 1,
            "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
        },
        "types": {
            "Person": [
                {"name": "name", "type": "string"},
                {"name": "wallet", "type": "address"},
            ],
            "Mail": [
                {"name": "from", "type": "Person"},
                {"name": "to", "type": "Person"},
                {"name": "contents", "type": "string"},
            ],
        },
        "primaryType": "Mail",
        "message": {
            "from": {"name": "Cow", "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"},
            "to": {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"},
            "contents": "Hello, Bob!",
        },
    }
)
hashes = document.hashes()
print("Domain separator:", "0x" + hashes.domain_separator.hex())
print("Message hash:    ", "0x" + hashes.message_hash.hex())
print("EIP-712 hash:    ", "0x" + hashes.eip712_hash.hex())

safe = safe_message_hashes(hashes.eip712_hash, 1, "0x" + "11" * 20)
print("Safe message hash:", "0x" + safe.eip712_hash.hex())

tx = SafeTransaction(
    to="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    nonce=63,
    data="0xa9059cbb00000000000000000000000092d0ebaf7eb707f0650f9471e61348f4656c29bc"
    "00000000000000000000000000000000000000000000000000000005d21dba00",
)
safe_tx = safe_tx_hashes(tx, 1, "0x1c694Fc3006D81ff4a56F97E1b99529066a23725")
print("Safe tx hash:     ", "0x" + safe_tx.eip712_hash.hex())
