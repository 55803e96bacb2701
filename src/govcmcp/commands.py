"""
Typed command definitions.

The catalogue lists every govc command; this module gives a typed flag
schema to the most-used subset. Each CommandDef becomes a dedicated agent
tool whose input schema is generated from its flags (see tools.py).
Everything else stays reachable through govc_run.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Literal

from govcmcp.catalogue import CatalogueEntry

logger = logging.getLogger(__name__)

FlagKind = Literal["string", "number", "boolean"]


@dataclass(frozen=True)
class FlagDef:
    """Schema for one govc flag."""
    kind: FlagKind
    description: str
    required: bool = False
    enum: tuple[str, ...] | None = None

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": self.kind,
            "description": self.description,
        }
        if self.enum:
            schema["enum"] = list(self.enum)
        return schema


@dataclass(frozen=True)
class CommandDef:
    """
    A govc command with a typed flag schema.

    positional_args describes the positional arguments in govc's usage
    notation (e.g. "VM..."); empty means the command takes none.
    """
    command: str
    description: str
    flags: dict[str, FlagDef] = field(default_factory=dict)
    positional_args: str = ""


# ---- Flag builders ----------------------------------------------------------

def string_flag(description: str, required: bool = False) -> FlagDef:
    return FlagDef("string", description, required)


def number_flag(description: str, required: bool = False) -> FlagDef:
    return FlagDef("number", description, required)


def bool_flag(description: str) -> FlagDef:
    return FlagDef("boolean", description)


def enum_flag(description: str, values: Iterable[str]) -> FlagDef:
    return FlagDef("string", description, enum=tuple(values))


# ---- Common flag groups -----------------------------------------------------

VM = {"vm": string_flag("Virtual machine [GOVC_VM]")}
HOST = {"host": string_flag("Host system [GOVC_HOST]")}
DS = {"ds": string_flag("Datastore [GOVC_DATASTORE]")}
CLUSTER = {"cluster": string_flag("Cluster [GOVC_CLUSTER]")}
FOLDER = {"folder": string_flag("Inventory folder [GOVC_FOLDER]")}
POOL = {"pool": string_flag("Resource pool [GOVC_RESOURCE_POOL]")}
NET = {"net": string_flag("Network [GOVC_NETWORK]")}
GUEST_LOGIN = {"l": string_flag("Guest VM credentials (user:password) [GOVC_GUEST_LOGIN]")}


COMMAND_DEFS: tuple[CommandDef, ...] = (
    # ---- Core / Navigation ----
    CommandDef(
        "about",
        "Display About info for HOST (name, type, version, build number)",
        {"l": bool_flag("Include service content")},
    ),
    CommandDef(
        "ls",
        "List inventory items. PATH defaults to current datacenter. Supports type aliases: "
        "m=VirtualMachine, h=HostSystem, s=Datastore, c=ClusterComputeResource, etc.",
        {
            "l": bool_flag("Long listing format"),
            "t": string_flag("Object type filter (e.g. m, h, s, c, d, f, n, p, r, w, g, a)"),
            "i": bool_flag("Print the managed object reference"),
            "I": bool_flag("Print the managed object ID"),
        },
        "PATH...",
    ),
    CommandDef(
        "find",
        "Find managed objects by type, name, or property. ROOT defaults to current datacenter. "
        "Type aliases: m=VirtualMachine, h=HostSystem, s=Datastore, c=ClusterComputeResource, etc.",
        {
            "type": string_flag("Resource type filter"),
            "name": string_flag("Resource name glob pattern (default: *)"),
            "l": bool_flag("Long listing format"),
            "i": bool_flag("Print the managed object reference"),
            "maxdepth": number_flag("Max depth (-1 for unlimited)"),
        },
        "[ROOT] [KEY VAL]...",
    ),
    CommandDef(
        "tree",
        "List contents of the inventory in a tree-like format",
        {
            "C": bool_flag("Colorize output"),
            "l": bool_flag("Follow runtime references (e.g. HostSystem VMs)"),
            "p": bool_flag("Print the object type"),
            "L": number_flag("Max display depth of the inventory tree"),
        },
        "[PATH]",
    ),
    CommandDef(
        "version",
        "Print govc version",
        {"l": bool_flag("Print detailed version information")},
    ),

    # ---- VM ----
    CommandDef(
        "vm.info",
        "Display info for VM. Use -r for resource summary (CPU, memory, storage, networks).",
        {
            **VM,
            "r": bool_flag("Show resource summary"),
            "e": bool_flag("Show ExtraConfig"),
            "t": bool_flag("Show ToolsConfigInfo"),
            "waitip": bool_flag("Wait for VM to acquire IP address"),
        },
        "VM...",
    ),
    CommandDef(
        "vm.create",
        "Create VM. Use -on=false to create without powering on.",
        {
            **DS,
            **FOLDER,
            **HOST,
            **POOL,
            "c": number_flag("Number of CPUs"),
            "m": number_flag("Size in MB of memory"),
            "g": string_flag("Guest OS ID (e.g. ubuntu64Guest, windows9_64Guest)"),
            "disk": string_flag("Disk path (existing) or size (new, e.g. 20GB)"),
            "iso": string_flag("ISO path"),
            **NET,
            "net.adapter": string_flag("Network adapter type (e.g. vmxnet3)"),
            "disk.controller": string_flag("Disk controller type (e.g. pvscsi, scsi)"),
            "firmware": enum_flag("Firmware type", ["bios", "efi"]),
            "on": bool_flag("Power on VM (default: true)"),
            "annotation": string_flag("VM description"),
            "cluster": string_flag("Use cluster for VM placement via DRS"),
            "version": string_flag("ESXi hardware version"),
        },
        "NAME",
    ),
    CommandDef(
        "vm.destroy",
        "Power off and delete VM. Any attached virtual disks are also deleted.",
        {},
        "VM...",
    ),
    CommandDef(
        "vm.clone",
        "Clone VM or template to NAME.",
        {
            **VM,
            **DS,
            **FOLDER,
            **HOST,
            **POOL,
            "c": number_flag("Number of CPUs"),
            "m": number_flag("Size in MB of memory"),
            "on": bool_flag("Power on VM (default: true)"),
            "link": bool_flag("Create linked clone"),
            "snapshot": string_flag("Snapshot name to clone from"),
            "template": bool_flag("Create a template"),
            "cluster": string_flag("Use cluster for DRS placement"),
            "customization": string_flag("Customization specification name"),
            "annotation": string_flag("VM description"),
            **NET,
        },
        "NAME",
    ),
    CommandDef(
        "vm.power",
        "Invoke VM power operations. Specify exactly one of the power flags.",
        {
            "on": bool_flag("Power on"),
            "off": bool_flag("Power off"),
            "reset": bool_flag("Power reset"),
            "suspend": bool_flag("Power suspend"),
            "r": bool_flag("Reboot guest"),
            "s": bool_flag("Shutdown guest"),
            "force": bool_flag("Force (ignore state error, hard shutdown if tools unavailable)"),
            "M": bool_flag("Use Datacenter.PowerOnMultiVM method"),
        },
        "NAME...",
    ),
    CommandDef(
        "vm.change",
        "Change VM configuration (CPU, memory, ExtraConfig, latency, etc.)",
        {
            **VM,
            "c": number_flag("Number of CPUs"),
            "m": number_flag("Size in MB of memory"),
            "e": string_flag("ExtraConfig key=value (can specify multiple)"),
            "name": string_flag("Display name"),
            "annotation": string_flag("VM description"),
            "g": string_flag("Guest OS"),
            "latency": enum_flag("Latency sensitivity", ["low", "normal", "medium", "high"]),
            "nested-hv-enabled": bool_flag("Enable nested hardware-assisted virtualization"),
            "cpu-hot-add-enabled": bool_flag("Enable CPU hot add"),
            "memory-hot-add-enabled": bool_flag("Enable memory hot add"),
        },
    ),
    CommandDef(
        "vm.ip",
        "List IPs for VM. By default waits up to 1h for vmware-tools to report.",
        {
            "a": bool_flag("Wait for an IP address on all NICs"),
            "v4": bool_flag("Only report IPv4 addresses"),
            "esxcli": bool_flag("Use esxcli instead of guest tools"),
            "n": string_flag("Wait for IP on NIC (by device name or MAC)"),
            "wait": string_flag("Wait time (e.g. 5m, 1h)"),
        },
        "VM...",
    ),
    CommandDef(
        "vm.migrate",
        "Migrate VM to a specific resource pool, host or datastore.",
        {
            **VM,
            **DS,
            **HOST,
            **POOL,
            **NET,
            "priority": string_flag("Task priority (defaultPriority)"),
        },
        "VM...",
    ),
    CommandDef(
        "vm.console",
        "Generate console URL or screen capture for VM.",
        {
            **VM,
            "h5": bool_flag("Generate HTML5 UI console link"),
            "capture": string_flag("Capture screen shot to file"),
        },
        "VM",
    ),

    # ---- Snapshot ----
    CommandDef(
        "snapshot.create",
        "Create snapshot of VM with NAME.",
        {
            **VM,
            "d": string_flag("Snapshot description"),
            "m": bool_flag("Include memory state (default: true)"),
            "q": bool_flag("Quiesce guest file system"),
        },
        "NAME",
    ),
    CommandDef(
        "snapshot.remove",
        'Remove snapshot of VM. NAME can be snapshot name, tree path, moid, or "*" for all.',
        {
            **VM,
            "c": bool_flag("Consolidate disks (default: true)"),
            "r": bool_flag("Remove snapshot children"),
        },
        "NAME",
    ),
    CommandDef(
        "snapshot.revert",
        "Revert to snapshot of VM. If NAME not provided, revert to current snapshot.",
        {
            **VM,
            "s": bool_flag("Suppress power on"),
        },
        "[NAME]",
    ),
    CommandDef(
        "snapshot.tree",
        "List VM snapshots in a tree-like format.",
        {
            **VM,
            "C": bool_flag("Print current snapshot name only"),
            "D": bool_flag("Print snapshot creation date"),
            "d": bool_flag("Print snapshot description"),
            "i": bool_flag("Print snapshot id"),
            "s": bool_flag("Print snapshot size"),
        },
    ),

    # ---- Device ----
    CommandDef(
        "device.info",
        "Device info for VM. Optionally filter by device name pattern.",
        {**VM},
        "[DEVICE]...",
    ),
    CommandDef(
        "device.ls",
        "List devices for VM.",
        {
            **VM,
            "boot": bool_flag("List devices configured in boot options"),
        },
    ),

    # ---- Host ----
    CommandDef("host.info", "Display host info.", {**HOST}),
    CommandDef(
        "host.maintenance.enter",
        "Put host in maintenance mode. No VMs can be powered on during maintenance.",
        {
            **HOST,
            "evacuate": bool_flag("Evacuate powered off VMs"),
            "timeout": number_flag("Timeout in seconds"),
        },
        "HOST...",
    ),
    CommandDef(
        "host.maintenance.exit",
        "Take host out of maintenance mode.",
        {
            **HOST,
            "timeout": number_flag("Timeout in seconds"),
        },
        "HOST...",
    ),
    CommandDef(
        "host.esxcli",
        "Invoke esxcli command on host. Example: govc host.esxcli network ip connection list",
        {**HOST},
        "COMMAND [ARG]...",
    ),
    CommandDef(
        "host.shutdown",
        "Shutdown or reboot host.",
        {
            **HOST,
            "f": bool_flag("Force shutdown when host is not in maintenance mode"),
            "r": bool_flag("Reboot host"),
        },
        "HOST...",
    ),
    CommandDef(
        "host.service",
        "Apply host service ACTION (start|stop|restart|status|enable|disable) to service ID.",
        {**HOST},
        "ACTION ID",
    ),
    CommandDef("host.service.ls", "List host services.", {**HOST}),

    # ---- Cluster ----
    CommandDef("cluster.create", "Create cluster in datacenter.", {**FOLDER}, "CLUSTER"),
    CommandDef(
        "cluster.change",
        "Change cluster configuration (DRS, HA, vSAN).",
        {
            "drs-enabled": bool_flag("Enable DRS"),
            "drs-mode": enum_flag("DRS behavior", ["manual", "partiallyAutomated", "fullyAutomated"]),
            "drs-vmotion-rate": number_flag("Aggressiveness of vMotions (1-5)"),
            "ha-enabled": bool_flag("Enable HA"),
            "ha-admission-control-enabled": bool_flag("Enable HA admission control"),
            "vsan-enabled": bool_flag("Enable vSAN"),
            "vsan-autoclaim": bool_flag("Autoclaim storage on cluster hosts"),
        },
        "CLUSTER...",
    ),
    CommandDef(
        "cluster.add",
        "Add host to cluster.",
        {
            **CLUSTER,
            "hostname": string_flag("Hostname or IP of the host", True),
            "username": string_flag("Username of admin account on the host", True),
            "password": string_flag("Password of admin account on the host", True),
            "thumbprint": string_flag("SHA-1 thumbprint of host SSL certificate"),
            "noverify": bool_flag("Accept host thumbprint without verification"),
            "license": string_flag("Assign license key"),
            "force": bool_flag("Force when host is managed by another VC"),
        },
    ),
    CommandDef(
        "cluster.usage",
        "Cluster resource usage summary (CPU, memory, storage).",
        {"S": bool_flag("Exclude host local storage")},
        "CLUSTER",
    ),

    # ---- Datacenter ----
    CommandDef("datacenter.create", "Create datacenter.", {**FOLDER}, "NAME..."),
    CommandDef("datacenter.info", "Display datacenter info.", {}, "[PATH]..."),

    # ---- Datastore ----
    CommandDef(
        "datastore.info",
        "Display info for datastores.",
        {"H": bool_flag("Display info for datastores shared between hosts")},
        "[PATH]...",
    ),
    CommandDef(
        "datastore.ls",
        "List files on datastore.",
        {
            **DS,
            "l": bool_flag("Long listing format"),
            "R": bool_flag("List subdirectories recursively"),
            "a": bool_flag("Show hidden entries"),
            "p": bool_flag("Append / indicator to directories"),
        },
        "[FILE]...",
    ),
    CommandDef(
        "datastore.create",
        "Create datastore on host (NFS, VMFS, local).",
        {
            **HOST,
            "type": enum_flag("Datastore type", ["NFS", "NFS41", "CIFS", "VMFS", "local"]),
            "name": string_flag("Datastore name", True),
            "disk": string_flag("Canonical name of disk (VMFS only)"),
            "remote-host": string_flag("Remote hostname (NFS)"),
            "remote-path": string_flag("Remote path (NFS)"),
            "path": string_flag("Local directory path (local only)"),
            "mode": enum_flag("Access mode", ["readOnly", "readWrite"]),
        },
        "HOST...",
    ),

    # ---- Network ----
    CommandDef(
        "dvs.create",
        "Create DistributedVirtualSwitch in datacenter.",
        {
            **FOLDER,
            "mtu": number_flag("DVS Max MTU"),
            "discovery-protocol": enum_flag("Link Discovery Protocol", ["lldp", "cdp"]),
            "num-uplinks": number_flag("Number of uplinks"),
            "product-version": string_flag("DVS product version"),
        },
        "DVS",
    ),
    CommandDef(
        "dvs.portgroup.add",
        "Add portgroup to DVS.",
        {
            "dvs": string_flag("DVS path", True),
            "type": enum_flag("Portgroup type / port binding", ["earlyBinding", "lateBinding", "ephemeral"]),
            "nports": number_flag("Number of ports (default: 128)"),
            "vlan": number_flag("VLAN ID"),
        },
        "NAME",
    ),
    CommandDef(
        "dvs.portgroup.info",
        "Portgroup info for DVS.",
        {
            "pg": string_flag("Distributed Virtual Portgroup"),
            "r": bool_flag("Show DVS rules"),
        },
        "DVS",
    ),

    # ---- Tags ----
    CommandDef(
        "tags.ls",
        "List tags, optionally filtered by category.",
        {"c": string_flag("Category name")},
    ),
    CommandDef(
        "tags.create",
        "Create tag. Category (-c) is required.",
        {
            "c": string_flag("Category name", True),
            "d": string_flag("Description of tag"),
        },
        "NAME",
    ),
    CommandDef(
        "tags.attach",
        "Attach tag NAME to object PATH.",
        {"c": string_flag("Tag category")},
        "NAME PATH",
    ),
    CommandDef(
        "tags.detach",
        "Detach tag NAME from object PATH.",
        {"c": string_flag("Tag category")},
        "NAME PATH",
    ),
    CommandDef(
        "tags.category.create",
        "Create tag category.",
        {
            "d": string_flag("Description"),
            "m": bool_flag("Allow multiple tags per object"),
            "t": string_flag("Object types (can specify multiple)"),
        },
        "NAME",
    ),
    CommandDef("tags.category.ls", "List all tag categories."),

    # ---- Content Library ----
    CommandDef("library.ls", "List libraries, items, and files.", {}, "[PATH]"),
    CommandDef(
        "library.info",
        "Display library information.",
        {
            "l": bool_flag("Long listing format"),
            "L": bool_flag("List datastore path only"),
            "U": bool_flag("List pub/sub URL(s) only"),
        },
        "[PATH]",
    ),
    CommandDef(
        "library.create",
        "Create content library.",
        {
            **DS,
            "pub": bool_flag("Publish library"),
            "sub": string_flag("Subscribe to library URL"),
        },
        "NAME",
    ),
    CommandDef(
        "library.deploy",
        "Deploy library OVF template.",
        {
            **DS,
            **FOLDER,
            **HOST,
            **POOL,
            "options": string_flag("Options spec file path for VM deployment"),
        },
        "TEMPLATE [NAME]",
    ),
    CommandDef("library.rm", "Delete library or item.", {}, "NAME"),
    CommandDef(
        "library.import",
        "Import items to library (OVA, OVF, ISO, VMDK).",
        {
            "n": string_flag("Library item name"),
            "t": string_flag("Library item type"),
            "pull": bool_flag("Pull library item from HTTP endpoint"),
        },
        "LIBRARY ITEM",
    ),

    # ---- Guest Operations ----
    CommandDef(
        "guest.run",
        "Run program in VM and display output. Waits for exit, propagates exit code.",
        {
            **VM,
            **GUEST_LOGIN,
            "C": string_flag("Working directory for the program"),
            "e": string_flag("Set environment variables (key=val)"),
            "d": string_flag('Input data string ("-" reads from stdin)'),
        },
        "PATH [ARG]...",
    ),
    CommandDef(
        "guest.ps",
        "List processes in VM guest.",
        {
            **VM,
            **GUEST_LOGIN,
            "e": bool_flag("Select all processes"),
            "p": string_flag("Select by process ID"),
            "U": string_flag("Select by process UID"),
        },
    ),
    CommandDef("guest.ls", "List files in VM guest.", {**VM, **GUEST_LOGIN}, "PATH"),

    # ---- Resource Pool ----
    CommandDef(
        "pool.info",
        "Display resource pool info.",
        {
            "a": bool_flag("List virtual app resource pools"),
            "p": bool_flag("List resource pools (default: true)"),
        },
        "POOL...",
    ),
    CommandDef(
        "pool.create",
        "Create resource pool.",
        {
            "cpu.reservation": number_flag("CPU reservation in MHz"),
            "cpu.limit": number_flag("CPU limit in MHz (-1 unlimited)"),
            "cpu.shares": string_flag("CPU shares level or number"),
            "mem.reservation": number_flag("Memory reservation in MB"),
            "mem.limit": number_flag("Memory limit in MB (-1 unlimited)"),
            "mem.shares": string_flag("Memory shares level or number"),
        },
        "POOL...",
    ),

    # ---- Permissions ----
    CommandDef(
        "permissions.ls",
        "List permissions defined on managed entities.",
        {"a": bool_flag("Include inherited permissions (default: true)")},
        "[PATH]...",
    ),
    CommandDef(
        "permissions.set",
        "Set permissions on managed entities.",
        {
            "principal": string_flag("User or group", True),
            "role": string_flag("Permission role name (default: Admin)"),
            "propagate": bool_flag("Propagate down the hierarchy (default: true)"),
            "group": bool_flag("True if principal is a group name"),
        },
        "[PATH]...",
    ),

    # ---- Events / Tasks / Logs ----
    CommandDef(
        "events",
        "Display events. Optionally filter by type or follow.",
        {
            "f": bool_flag("Follow event stream"),
            "n": number_flag("Output the last N events (default: 25)"),
            "type": string_flag("Include only specified event types"),
            "l": bool_flag("Long listing format"),
        },
        "[PATH]...",
    ),
    CommandDef(
        "tasks",
        "Display info for recent tasks.",
        {
            "f": bool_flag("Follow recent task updates"),
            "n": number_flag("Output the last N tasks (default: 25)"),
            "l": bool_flag("Use long task description"),
            "r": bool_flag("Include child entities when PATH is specified"),
        },
        "[PATH]",
    ),
    CommandDef(
        "logs",
        "View VPX and ESX logs.",
        {
            **HOST,
            "log": string_flag("Log file key"),
            "n": number_flag("Output the last N log lines (default: 25)"),
            "f": bool_flag("Follow log file changes"),
        },
    ),

    # ---- Metrics ----
    CommandDef(
        "metric.ls",
        "List available metrics for PATH.",
        {
            "l": bool_flag("Long listing format"),
            "L": bool_flag("Longer listing (units, instance count, description)"),
            "g": string_flag("List a specific group"),
            "i": string_flag("Interval ID (real|day|week|month|year)"),
        },
        "PATH",
    ),
    CommandDef(
        "metric.sample",
        "Sample metric for object. Interval defaults to 20 (realtime) if supported.",
        {
            "n": number_flag("Max number of samples (default: 5)"),
            "instance": string_flag("Instance (default: * for all)"),
            "i": string_flag("Interval ID (real|day|week|month|year)"),
            "t": bool_flag("Include sample times"),
        },
        "PATH... NAME...",
    ),

    # ---- Import ----
    CommandDef(
        "import.ova",
        "Import OVA.",
        {
            **DS,
            **FOLDER,
            **HOST,
            **POOL,
            "name": string_flag("Name for new entity"),
            "net": string_flag("Network"),
            "options": string_flag("Options spec file path"),
        },
        "PATH_TO_OVA",
    ),

    # ---- Storage Policy ----
    CommandDef(
        "storage.policy.ls",
        "List VM storage policies.",
        {"i": bool_flag("List policy ID only")},
        "[NAME]",
    ),

    # ---- Session ----
    CommandDef(
        "session.ls",
        "List active sessions.",
        {
            "S": bool_flag("List current SOAP session only"),
            "r": bool_flag("List cached REST session"),
        },
    ),

    # ---- vSAN ----
    CommandDef("vsan.info", "Display vSAN configuration.", {}, "CLUSTER..."),

    # ---- Alarms ----
    CommandDef(
        "alarms",
        "Show triggered or declared alarms.",
        {
            "d": bool_flag("Show declared alarms"),
            "l": bool_flag("Long listing output"),
            "n": string_flag("Filter by alarm name"),
            "ack": bool_flag("Acknowledge alarms"),
        },
        "[PATH]",
    ),
)


def check_catalogue_sync(
    command_defs: Iterable[CommandDef],
    entries: Iterable[CatalogueEntry],
) -> list[str]:
    """
    Cross-check typed command defs against the search catalogue.

    A typed command missing from the catalogue cannot be found by search;
    that is returned and logged as a warning. Catalogue entries without a
    typed def are normal (they run through govc_run) and only logged at
    debug level.
    """
    def_names = {d.command for d in command_defs}
    entry_names = {e.name for e in entries}

    problems = []
    for name in sorted(def_names - entry_names):
        message = f'Tool "{name}" has no search index entry in the catalogue'
        logger.warning(message)
        problems.append(message)

    untyped = entry_names - def_names
    if untyped:
        logger.debug(f"{len(untyped)} catalogue commands have no typed tool (reachable via govc_run)")

    return problems
