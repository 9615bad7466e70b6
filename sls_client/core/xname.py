"""
Hierarchical component identifiers ("xnames").

An xname names a piece of hardware by its position in the system, e.g.
``x1000c0s7b0n1`` is node 1 on BMC 0 in slot 7 of chassis 0 in cabinet
x1000. The table below follows the HMS component-name grammar: cabinets
are numbered with at most four digits and chassis run from 0 to 7.
"""

import re

_CABINET = r"x[0-9]{1,4}"
_CHASSIS = _CABINET + r"c[0-7]"
_SLOT = _CHASSIS + r"s[0-9]+"
_NODE = _SLOT + r"b[0-9]+n[0-9]+"
_ROUTER = _CHASSIS + r"r[0-9]+"
_PDU_CONTROLLER = _CABINET + r"m[0-3]"

XNAME_PATTERNS: dict[str, str] = {
    # Non-hardware identifiers
    "System": r"s0",
    "Partition": r"p[0-9]+(\.[0-9]+)?",
    "HMSTypeAll": r"all",
    "HMSTypeAllComp": r"all_comp",
    "HMSTypeAllSvc": r"all_svc",
    # Coolant distribution units
    "CDU": r"d[0-9]+",
    "CDUMgmtSwitch": r"d[0-9]+w[0-9]+",
    # Cabinet level
    "Cabinet": _CABINET,
    "CabinetBMC": _CABINET + r"b0",
    "CabinetCDU": _CABINET + r"d[0-1]",
    "CEC": _CABINET + r"e[0-1]",
    "CabinetPDUController": _PDU_CONTROLLER,
    "CabinetPDUNic": _PDU_CONTROLLER + r"i[0-3]",
    "CabinetPDU": _PDU_CONTROLLER + r"p[0-7]",
    "CabinetPDUOutlet": _PDU_CONTROLLER + r"p[0-7]j[1-9][0-9]*",
    "CabinetPDUPowerConnector": _PDU_CONTROLLER + r"p[0-7]v[1-9][0-9]*",
    # Chassis level
    "Chassis": _CHASSIS,
    "ChassisBMC": _CHASSIS + r"b0",
    "ChassisBMCNic": _CHASSIS + r"b0i[0-3]",
    "CMMFpga": _CHASSIS + r"f0",
    "CMMRectifier": _CHASSIS + r"t[0-9]",
    "MgmtSwitch": _CHASSIS + r"w[1-9][0-9]*",
    "MgmtSwitchConnector": _CHASSIS + r"w[1-9][0-9]*j[1-9][0-9]*",
    "MgmtHLSwitchEnclosure": _CHASSIS + r"h[1-9][0-9]*",
    "MgmtHLSwitch": _CHASSIS + r"h[1-9][0-9]*s[1-9]",
    # Compute blades and nodes
    "ComputeModule": _SLOT,
    "NodeEnclosure": _SLOT + r"e[0-9]+",
    "NodeEnclosurePowerSupply": _SLOT + r"e[0-9]+t[0-9]+",
    "NodePowerConnector": _SLOT + r"v[0-9]+",
    "NodeBMC": _SLOT + r"b[0-9]+",
    "NodeBMCNic": _SLOT + r"b[0-9]+i[0-3]",
    "NodeFpga": _SLOT + r"b[0-9]+f[0-9]+",
    "Node": _NODE,
    "NodeAccel": _NODE + r"a[0-9]+",
    "NodeAccelRiser": _NODE + r"r[0-7]",
    "NodeHsnNic": _NODE + r"h[0-3]",
    "NodeNic": _NODE + r"i[0-3]",
    "Processor": _NODE + r"p[0-3]",
    "Memory": _NODE + r"d[0-9]+",
    "StorageGroup": _NODE + r"g[0-9]+",
    "Drive": _NODE + r"g[0-9]+k[0-9]+",
    # Router blades and the high speed network
    "RouterModule": _ROUTER,
    "RouterFpga": _ROUTER + r"f[0-1]",
    "RouterTOR": _ROUTER + r"t[0-9]+",
    "RouterTORFpga": _ROUTER + r"t[0-9]+f[0-1]",
    "RouterBMC": _ROUTER + r"b[0-9]+",
    "RouterBMCNic": _ROUTER + r"b[0-9]+i[0-3]",
    "RouterPowerConnector": _ROUTER + r"v[0-9]+",
    "HSNBoard": _ROUTER + r"e[0-9]+",
    "HSNAsic": _ROUTER + r"a[0-9]+",
    "HSNLink": _ROUTER + r"a[0-9]+l[0-9]+",
    "HSNConnector": _ROUTER + r"j[0-9]+",
    "HSNConnectorPort": _ROUTER + r"j[0-9]+p[0-2]",
}

_COMPILED_PATTERNS = [
    (type_name, re.compile(pattern, re.IGNORECASE | re.ASCII)) for type_name, pattern in XNAME_PATTERNS.items()
]


def xname_type(xname: str) -> str | None:
    """Return the component type an xname names, or None if it is not a valid xname."""
    if not isinstance(xname, str):
        return None
    for type_name, pattern in _COMPILED_PATTERNS:
        if pattern.fullmatch(xname):
            return type_name
    return None


def is_valid_xname(xname: str) -> bool:
    """Check whether a string is a well-formed xname."""
    return xname_type(xname) is not None
