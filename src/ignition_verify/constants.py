"""Configuration constants for ignition-verify library."""

from .types import ChainConfig

# Built-in verifier endpoints, searched after any custom chains
# Based on the Etherscan-family explorers supported by hardhat-verify
BUILTIN_CHAINS = (
    ChainConfig("mainnet", 1, "https://api.etherscan.io/api", "https://etherscan.io"),
    ChainConfig("goerli", 5, "https://api-goerli.etherscan.io/api", "https://goerli.etherscan.io"),
    ChainConfig(
        "optimisticEthereum",
        10,
        "https://api-optimistic.etherscan.io/api",
        "https://optimistic.etherscan.io/",
    ),
    ChainConfig("bsc", 56, "https://api.bscscan.com/api", "https://bscscan.com"),
    ChainConfig("sokol", 77, "https://blockscout.com/poa/sokol/api", "https://blockscout.com/poa/sokol"),
    ChainConfig("bscTestnet", 97, "https://api-testnet.bscscan.com/api", "https://testnet.bscscan.com"),
    ChainConfig("xdai", 100, "https://api.gnosisscan.io/api", "https://gnosisscan.io"),
    ChainConfig("heco", 128, "https://api.hecoinfo.com/api", "https://hecoinfo.com"),
    ChainConfig("polygon", 137, "https://api.polygonscan.com/api", "https://polygonscan.com"),
    ChainConfig("opera", 250, "https://api.ftmscan.com/api", "https://ftmscan.com"),
    ChainConfig("hecoTestnet", 256, "https://api-testnet.hecoinfo.com/api", "https://testnet.hecoinfo.com"),
    ChainConfig(
        "optimisticGoerli",
        420,
        "https://api-goerli-optimism.etherscan.io/api",
        "https://goerli-optimism.etherscan.io/",
    ),
    ChainConfig("polygonZkEVM", 1101, "https://api-zkevm.polygonscan.com/api", "https://zkevm.polygonscan.com"),
    ChainConfig("moonbeam", 1284, "https://api-moonbeam.moonscan.io/api", "https://moonbeam.moonscan.io"),
    ChainConfig("moonriver", 1285, "https://api-moonriver.moonscan.io/api", "https://moonriver.moonscan.io"),
    ChainConfig("moonbaseAlpha", 1287, "https://api-moonbase.moonscan.io/api", "https://moonbase.moonscan.io/"),
    ChainConfig(
        "polygonZkEVMTestnet",
        1442,
        "https://api-testnet-zkevm.polygonscan.com/api",
        "https://testnet-zkevm.polygonscan.com",
    ),
    ChainConfig("ftmTestnet", 4002, "https://api-testnet.ftmscan.com/api", "https://testnet.ftmscan.com"),
    ChainConfig("base", 8453, "https://api.basescan.org/api", "https://basescan.org/"),
    ChainConfig("chiado", 10200, "https://gnosis-chiado.blockscout.com/api", "https://gnosis-chiado.blockscout.com"),
    ChainConfig("holesky", 17000, "https://api-holesky.etherscan.io/api", "https://holesky.etherscan.io"),
    ChainConfig("arbitrumOne", 42161, "https://api.arbiscan.io/api", "https://arbiscan.io/"),
    ChainConfig("arbitrumNova", 42170, "https://api-nova.arbiscan.io/api", "https://nova.arbiscan.io/"),
    ChainConfig("avalancheFujiTestnet", 43113, "https://api-testnet.snowtrace.io/api", "https://testnet.snowtrace.io/"),
    ChainConfig("avalanche", 43114, "https://api.snowtrace.io/api", "https://snowtrace.io/"),
    ChainConfig("polygonMumbai", 80001, "https://api-testnet.polygonscan.com/api", "https://mumbai.polygonscan.com/"),
    ChainConfig("baseGoerli", 84531, "https://api-goerli.basescan.org/api", "https://goerli.basescan.org/"),
    ChainConfig("arbitrumTestnet", 421611, "https://api-testnet.arbiscan.io/api", "https://testnet.arbiscan.io/"),
    ChainConfig("arbitrumGoerli", 421613, "https://api-goerli.arbiscan.io/api", "https://goerli.arbiscan.io/"),
    ChainConfig("arbitrumSepolia", 421614, "https://api-sepolia.arbiscan.io/api", "https://sepolia.arbiscan.io/"),
    ChainConfig("sepolia", 11155111, "https://api-sepolia.etherscan.io/api", "https://sepolia.etherscan.io"),
    ChainConfig("aurora", 1313161554, "https://explorer.mainnet.aurora.dev/api", "https://aurora.dev"),
    ChainConfig("auroraTestnet", 1313161555, "https://explorer.testnet.aurora.dev/api", "https://aurora.dev"),
    ChainConfig("harmony", 1666600000, "https://ctrver.t.hmny.io/verify", "https://explorer.harmony.one"),
    ChainConfig(
        "harmonyTest",
        1666700000,
        "https://ctrver.t.hmny.io/verify?network=testnet",
        "https://explorer.pops.one",
    ),
)

# Deployment directory layout
JOURNAL_FILENAME = "journal.jsonl"
ARTIFACTS_DIRNAME = "artifacts"
BUILD_INFO_DIRNAME = "build-info"

# Environment variable overriding the default deployments root
DEPLOYMENTS_DIR_ENV = "IGNITION_DEPLOYMENTS_DIR"

# Journal message types consumed by the state replay
DEPLOYMENT_INITIALIZE = "DEPLOYMENT_INITIALIZE"
WIPE_APPLY = "WIPE_APPLY"
EXECUTION_STATE_INITIALIZE_SUFFIX = "_EXECUTION_STATE_INITIALIZE"
EXECUTION_STATE_COMPLETE_SUFFIX = "_EXECUTION_STATE_COMPLETE"

# Maps the journal message prefix to the execution state it creates
MESSAGE_PREFIX_TO_STATE_TYPE = {
    "DEPLOYMENT": "DEPLOYMENT_EXECUTION_STATE",
    "CALL": "CALL_EXECUTION_STATE",
    "STATIC_CALL": "STATIC_CALL_EXECUTION_STATE",
    "ENCODE_FUNCTION_CALL": "ENCODE_FUNCTION_CALL_EXECUTION_STATE",
    "CONTRACT_AT": "CONTRACT_AT_EXECUTION_STATE",
    "READ_EVENT_ARGUMENT": "READ_EVENT_ARGUMENT_EXECUTION_STATE",
    "SEND_DATA": "SEND_DATA_EXECUTION_STATE",
}

# Execution states that are created already complete
INSTANTLY_SUCCESSFUL_PREFIXES = {"ENCODE_FUNCTION_CALL", "CONTRACT_AT", "READ_EVENT_ARGUMENT"}
