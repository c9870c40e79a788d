"""
Contract ABIs used to check deployed Clanker tokens.

Only the ERC-20 metadata getters are needed; the token's constructor layout
is captured in constants.TOKEN_CONSTRUCTOR_TYPES.
"""

# ERC-20 subset of the Clanker token ABI
CLANKER_TOKEN_ABI = [
    {
        "type": "function",
        "name": "name",
        "inputs": [],
        "outputs": [{"type": "string"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "symbol",
        "inputs": [],
        "outputs": [{"type": "string"}],
        "stateMutability": "view",
    },
]
