"""Known ssh_config(5) keywords.

These exist for convenience and to avoid typos in calling code. The parser
stores any keyword it reads, known or not.
"""

HOST = "Host"
MATCH = "Match"
ADDRESS_FAMILY = "AddressFamily"
BATCH_MODE = "BatchMode"
BIND_ADDRESS = "BindAddress"
CANONICAL_DOMAINS = "CanonicalDomains"
CANONICALIZE_FALLBACK_LOCAL = "CanonicalizeFallbackLocal"
CANONICALIZE_HOSTNAME = "CanonicalizeHostname"
CANONICALIZE_MAX_DOTS = "CanonicalizeMaxDots"
CANONICALIZE_PERMITTED_CNAMES = "CanonicalizePermittedCNAMEs"
CHALLENGE_RESPONSE_AUTHENTICATION = "ChallengeResponseAuthentication"
CHECK_HOST_IP = "CheckHostIP"
CIPHER = "Cipher"
CIPHERS = "Ciphers"
CLEAR_ALL_FORWARDINGS = "ClearAllForwardings"
COMPRESSION = "Compression"
COMPRESSION_LEVEL = "CompressionLevel"
CONNECTION_ATTEMPTS = "ConnectionAttempts"
CONNECT_TIMEOUT = "ConnectTimeout"
CONTROL_MASTER = "ControlMaster"
CONTROL_PATH = "ControlPath"
CONTROL_PERSIST = "ControlPersist"
DYNAMIC_FORWARD = "DynamicForward"
ENABLE_SSH_KEYSIGN = "EnableSSHKeysign"
ESCAPE_CHAR = "EscapeChar"
EXIT_ON_FORWARD_FAILURE = "ExitOnForwardFailure"
FINGERPRINT_HASH = "FingerprintHash"
FORWARD_AGENT = "ForwardAgent"
FORWARD_X11 = "ForwardX11"
FORWARD_X11_TIMEOUT = "ForwardX11Timeout"
FORWARD_X11_TRUSTED = "ForwardX11Trusted"
GATEWAY_PORTS = "GatewayPorts"
GLOBAL_KNOWN_HOSTS_FILE = "GlobalKnownHostsFile"
GSSAPI_AUTHENTICATION = "GSSAPIAuthentication"
GSSAPI_DELEGATE_CREDENTIALS = "GSSAPIDelegateCredentials"
HASH_KNOWN_HOSTS = "HashKnownHosts"
HOSTBASED_AUTHENTICATION = "HostbasedAuthentication"
HOSTBASED_KEY_TYPES = "HostbasedKeyTypes"
HOST_KEY_ALGORITHMS = "HostKeyAlgorithms"
HOST_KEY_ALIAS = "HostKeyAlias"
HOST_NAME = "HostName"
IDENTITIES_ONLY = "IdentitiesOnly"
IDENTITY_FILE = "IdentityFile"
IGNORE_UNKNOWN = "IgnoreUnknown"
IPQOS = "IPQoS"
KBD_INTERACTIVE_AUTHENTICATION = "KbdInteractiveAuthentication"
KBD_INTERACTIVE_DEVICES = "KbdInteractiveDevices"
KEX_ALGORITHMS = "KexAlgorithms"
LOCAL_COMMAND = "LocalCommand"
LOCAL_FORWARD = "LocalForward"
LOG_LEVEL = "LogLevel"
MACS = "MACs"
NO_HOST_AUTHENTICATION_FOR_LOCALHOST = "NoHostAuthenticationForLocalhost"
NUMBER_OF_PASSWORD_PROMPTS = "NumberOfPasswordPrompts"
PASSWORD_AUTHENTICATION = "PasswordAuthentication"
PERMIT_LOCAL_COMMAND = "PermitLocalCommand"
PKCS11_PROVIDER = "PKCS11Provider"
PORT = "Port"
PREFERRED_AUTHENTICATIONS = "PreferredAuthentications"
PROTOCOL = "Protocol"
PROXY_COMMAND = "ProxyCommand"
PROXY_USE_FDPASS = "ProxyUseFdpass"
PUBKEY_AUTHENTICATION = "PubkeyAuthentication"
REKEY_LIMIT = "RekeyLimit"
REMOTE_FORWARD = "RemoteForward"
REQUEST_TTY = "RequestTTY"
REVOKED_HOST_KEYS = "RevokedHostKeys"
RHOSTS_RSA_AUTHENTICATION = "RhostsRSAAuthentication"
RSA_AUTHENTICATION = "RSAAuthentication"
SEND_ENV = "SendEnv"
SERVER_ALIVE_COUNT_MAX = "ServerAliveCountMax"
SERVER_ALIVE_INTERVAL = "ServerAliveInterval"
STREAM_LOCAL_BIND_MASK = "StreamLocalBindMask"
STREAM_LOCAL_BIND_UNLINK = "StreamLocalBindUnlink"
STRICT_HOST_KEY_CHECKING = "StrictHostKeyChecking"
TCP_KEEP_ALIVE = "TCPKeepAlive"
TUNNEL = "Tunnel"
TUNNEL_DEVICE = "TunnelDevice"
UPDATE_HOST_KEYS = "UpdateHostKeys"
USE_PRIVILEGED_PORT = "UsePrivilegedPort"
USER = "User"
USER_KNOWN_HOSTS_FILE = "UserKnownHostsFile"
VERIFY_HOST_KEY_DNS = "VerifyHostKeyDNS"
VISUAL_HOST_KEY = "VisualHostKey"
XAUTH_LOCATION = "XAuthLocation"

KNOWN_KEYWORDS = frozenset(
    value
    for name, value in dict(globals()).items()
    if name.isupper() and isinstance(value, str)
)


def is_known_keyword(keyword: str) -> bool:
    """Return True if keyword is in the ssh_config(5) catalog (case-sensitive)."""
    return keyword in KNOWN_KEYWORDS
