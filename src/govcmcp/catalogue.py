"""
Command catalogue - every govc command known to the search index.

This is static data: the name, a one-line description and a category for
each govc command. It is loaded once at startup and never mutated.
Commands listed here are reachable through govc_run even when they have no
typed tool in commands.py.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogueEntry:
    """One searchable govc command."""
    name: str
    description: str
    category: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
        }


COMMAND_INDEX: tuple[CatalogueEntry, ...] = (
    # Core / Navigation
    CatalogueEntry("about", "Display About info for HOST (name, type, version, build)", "core"),
    CatalogueEntry("about.cert", "Display TLS certificate info for HOST", "core"),
    CatalogueEntry("env", "Output the environment variables for this client", "core"),
    CatalogueEntry("find", "Find managed objects by type, name, or property", "core"),
    CatalogueEntry("ls", "List inventory items", "core"),
    CatalogueEntry("tree", "List contents of the inventory in a tree-like format", "core"),
    CatalogueEntry("version", "Print govc version", "core"),
    CatalogueEntry("collect", "Collect managed object properties", "core"),

    # VM
    CatalogueEntry("vm.info", "Display info for VM (general, resource, extraconfig)", "vm"),
    CatalogueEntry("vm.create", "Create VM", "vm"),
    CatalogueEntry("vm.destroy", "Power off and delete VM", "vm"),
    CatalogueEntry("vm.clone", "Clone VM or template to NAME", "vm"),
    CatalogueEntry("vm.power", "Invoke VM power operations (on/off/reset/suspend/reboot/shutdown)", "vm"),
    CatalogueEntry("vm.change", "Change VM configuration (CPU, memory, ExtraConfig, etc.)", "vm"),
    CatalogueEntry("vm.ip", "List IPs for VM", "vm"),
    CatalogueEntry("vm.migrate", "Migrate VM to a specific resource pool, host or datastore", "vm"),
    CatalogueEntry("vm.console", "Generate console URL or screen capture for VM", "vm"),
    CatalogueEntry("vm.register", "Add an existing VM to the inventory", "vm"),
    CatalogueEntry("vm.unregister", "Remove VM from inventory without removing files on disk", "vm"),
    CatalogueEntry("vm.upgrade", "Upgrade VMs to latest hardware version", "vm"),
    CatalogueEntry("vm.markastemplate", "Mark VM as a virtual machine template", "vm"),
    CatalogueEntry("vm.markasvm", "Mark VM template as a virtual machine", "vm"),
    CatalogueEntry("vm.customize", "Customize VM (hostname, IP, domain, etc.)", "vm"),
    CatalogueEntry("vm.instantclone", "Instant Clone VM", "vm"),
    CatalogueEntry("vm.vnc", "Enable or disable VNC for VM", "vm"),
    CatalogueEntry("vm.keystrokes", "Send keystrokes to VM", "vm"),
    CatalogueEntry("vm.question", "Answer VM question prompt", "vm"),
    CatalogueEntry("vm.option.info", "VM config options for CLUSTER", "vm"),
    CatalogueEntry("vm.option.ls", "List VM config option keys for CLUSTER", "vm"),
    CatalogueEntry("vm.policy.ls", "List VM storage policies", "vm"),
    CatalogueEntry("vm.target.info", "VM config target info", "vm"),
    CatalogueEntry("vm.target.cap.ls", "List VM config target capabilities", "vm"),
    CatalogueEntry("vm.guest.tools", "Manage guest tools in VM (mount/unmount/upgrade)", "vm"),

    # VM Disk
    CatalogueEntry("vm.disk.attach", "Attach existing disk to VM", "vm"),
    CatalogueEntry("vm.disk.change", "Change VM disk properties (size, mode)", "vm"),
    CatalogueEntry("vm.disk.create", "Create disk and attach to VM", "vm"),
    CatalogueEntry("vm.disk.promote", "Promote VM disk", "vm"),

    # VM Network
    CatalogueEntry("vm.network.add", "Add network adapter to VM", "vm"),
    CatalogueEntry("vm.network.change", "Change network DEVICE configuration on VM", "vm"),

    # VM RDM
    CatalogueEntry("vm.rdm.attach", "Attach device to VM with RDM", "vm"),
    CatalogueEntry("vm.rdm.ls", "List available RDM devices for VM", "vm"),

    # VM Dataset
    CatalogueEntry("vm.dataset.create", "Create data set on a VM", "vm"),
    CatalogueEntry("vm.dataset.info", "Display data set information", "vm"),
    CatalogueEntry("vm.dataset.ls", "List datasets on VM", "vm"),
    CatalogueEntry("vm.dataset.rm", "Delete data set from VM", "vm"),
    CatalogueEntry("vm.dataset.update", "Update data set on VM", "vm"),
    CatalogueEntry("vm.dataset.entry.get", "Read the value of a data set entry", "vm"),
    CatalogueEntry("vm.dataset.entry.ls", "List keys of entries in a data set", "vm"),
    CatalogueEntry("vm.dataset.entry.rm", "Delete data set entry", "vm"),
    CatalogueEntry("vm.dataset.entry.set", "Set the value of a data set entry", "vm"),

    # Snapshot
    CatalogueEntry("snapshot.create", "Create snapshot of VM", "snapshot"),
    CatalogueEntry("snapshot.remove", "Remove snapshot of VM", "snapshot"),
    CatalogueEntry("snapshot.revert", "Revert to snapshot of VM", "snapshot"),
    CatalogueEntry("snapshot.tree", "List VM snapshots in a tree-like format", "snapshot"),
    CatalogueEntry("snapshot.export", "Export snapshot of VM", "snapshot"),

    # Device
    CatalogueEntry("device.boot", "Configure VM boot settings", "device"),
    CatalogueEntry("device.cdrom.add", "Add CD-ROM device to VM", "device"),
    CatalogueEntry("device.cdrom.eject", "Eject media from CD-ROM device", "device"),
    CatalogueEntry("device.cdrom.insert", "Insert media into CD-ROM device", "device"),
    CatalogueEntry("device.clock.add", "Add precision clock device to VM", "device"),
    CatalogueEntry("device.connect", "Connect device on VM", "device"),
    CatalogueEntry("device.disconnect", "Disconnect device on VM", "device"),
    CatalogueEntry("device.floppy.add", "Add floppy device to VM", "device"),
    CatalogueEntry("device.floppy.eject", "Eject image from floppy device", "device"),
    CatalogueEntry("device.floppy.insert", "Insert image into floppy device", "device"),
    CatalogueEntry("device.info", "Device info for VM", "device"),
    CatalogueEntry("device.ls", "List devices for VM", "device"),
    CatalogueEntry("device.model.tree", "Print the device model as a tree", "device"),
    CatalogueEntry("device.pci.add", "Add PCI Passthrough device to VM", "device"),
    CatalogueEntry("device.pci.ls", "List allowed PCI passthrough devices for VM", "device"),
    CatalogueEntry("device.pci.remove", "Remove PCI Passthrough device from VM", "device"),
    CatalogueEntry("device.remove", "Remove device from VM", "device"),
    CatalogueEntry("device.sata.add", "Add SATA controller to VM", "device"),
    CatalogueEntry("device.scsi.add", "Add SCSI controller to VM", "device"),
    CatalogueEntry("device.serial.add", "Add serial port to VM", "device"),
    CatalogueEntry("device.serial.connect", "Connect service URI to serial port", "device"),
    CatalogueEntry("device.serial.disconnect", "Disconnect service URI from serial port", "device"),
    CatalogueEntry("device.usb.add", "Add USB device to VM", "device"),

    # Host
    CatalogueEntry("host.info", "Display host info", "host"),
    CatalogueEntry("host.add", "Add host to datacenter", "host"),
    CatalogueEntry("host.remove", "Remove host from vCenter", "host"),
    CatalogueEntry("host.disconnect", "Disconnect host from vCenter", "host"),
    CatalogueEntry("host.reconnect", "Reconnect host to vCenter", "host"),
    CatalogueEntry("host.shutdown", "Shutdown or reboot host", "host"),
    CatalogueEntry("host.maintenance.enter", "Put host in maintenance mode", "host"),
    CatalogueEntry("host.maintenance.exit", "Take host out of maintenance mode", "host"),
    CatalogueEntry("host.esxcli", "Invoke esxcli command on host", "host"),
    CatalogueEntry("host.service", "Apply host service ACTION to service ID", "host"),
    CatalogueEntry("host.service.ls", "List host services", "host"),
    CatalogueEntry("host.storage.info", "Show host storage system information", "host"),
    CatalogueEntry("host.storage.mark", "Mark device as local or SSD", "host"),
    CatalogueEntry("host.storage.partition", "Show partition table for device", "host"),
    CatalogueEntry("host.date.info", "Display date and time info for host", "host"),
    CatalogueEntry("host.date.change", "Change date and time for host", "host"),
    CatalogueEntry("host.cert.info", "Display SSL certificate info for host", "host"),
    CatalogueEntry("host.cert.csr", "Generate CSR for host", "host"),
    CatalogueEntry("host.cert.import", "Install SSL certificate on host", "host"),
    CatalogueEntry("host.option.ls", "List host options", "host"),
    CatalogueEntry("host.option.set", "Set host option", "host"),
    CatalogueEntry("host.portgroup.add", "Add portgroup to host", "host"),
    CatalogueEntry("host.portgroup.change", "Change host portgroup configuration", "host"),
    CatalogueEntry("host.portgroup.info", "Display host portgroup info", "host"),
    CatalogueEntry("host.portgroup.remove", "Remove portgroup from host", "host"),
    CatalogueEntry("host.vswitch.add", "Add vSwitch to host", "host"),
    CatalogueEntry("host.vswitch.info", "Display vSwitch info for host", "host"),
    CatalogueEntry("host.vswitch.remove", "Remove vSwitch from host", "host"),
    CatalogueEntry("host.vnic.info", "Display virtual nic info", "host"),
    CatalogueEntry("host.vnic.change", "Change virtual nic properties", "host"),
    CatalogueEntry("host.vnic.hint", "Query virtual nic hints", "host"),
    CatalogueEntry("host.vnic.service", "Enable or disable service on virtual nic", "host"),
    CatalogueEntry("host.account.create", "Create local account on host", "host"),
    CatalogueEntry("host.account.remove", "Remove local account on host", "host"),
    CatalogueEntry("host.account.update", "Update local account on host", "host"),
    CatalogueEntry("host.autostart.add", "Add VM to host autostart", "host"),
    CatalogueEntry("host.autostart.configure", "Configure host autostart", "host"),
    CatalogueEntry("host.autostart.info", "Display host autostart info", "host"),
    CatalogueEntry("host.autostart.remove", "Remove VM from host autostart", "host"),
    CatalogueEntry("host.tpm.info", "TPM summary for host", "host"),
    CatalogueEntry("host.tpm.report", "TPM report for host", "host"),

    # Cluster
    CatalogueEntry("cluster.add", "Add host to cluster", "cluster"),
    CatalogueEntry("cluster.change", "Change cluster configuration (DRS, HA, vSAN)", "cluster"),
    CatalogueEntry("cluster.create", "Create cluster in datacenter", "cluster"),
    CatalogueEntry("cluster.mv", "Move host to cluster", "cluster"),
    CatalogueEntry("cluster.usage", "Cluster resource usage summary", "cluster"),
    CatalogueEntry("cluster.stretch", "Convert vSAN cluster into stretched cluster", "cluster"),
    CatalogueEntry("cluster.group.create", "Create cluster group (VM or host)", "cluster"),
    CatalogueEntry("cluster.group.change", "Set cluster group members", "cluster"),
    CatalogueEntry("cluster.group.ls", "List cluster groups and members", "cluster"),
    CatalogueEntry("cluster.group.remove", "Remove cluster group", "cluster"),
    CatalogueEntry("cluster.rule.create", "Create cluster rule (affinity, anti-affinity, vm-host)", "cluster"),
    CatalogueEntry("cluster.rule.change", "Change cluster rule", "cluster"),
    CatalogueEntry("cluster.rule.info", "Cluster rule detailed info", "cluster"),
    CatalogueEntry("cluster.rule.ls", "List cluster rules and members", "cluster"),
    CatalogueEntry("cluster.rule.remove", "Remove cluster rule", "cluster"),
    CatalogueEntry("cluster.override.change", "Change cluster VM overrides (DRS, HA)", "cluster"),
    CatalogueEntry("cluster.override.info", "Cluster VM overrides info", "cluster"),
    CatalogueEntry("cluster.override.remove", "Remove cluster VM overrides", "cluster"),
    CatalogueEntry("cluster.module.create", "Create cluster module", "cluster"),
    CatalogueEntry("cluster.module.ls", "List cluster modules", "cluster"),
    CatalogueEntry("cluster.module.rm", "Delete cluster module", "cluster"),
    CatalogueEntry("cluster.module.vm.add", "Add VMs to cluster module", "cluster"),
    CatalogueEntry("cluster.module.vm.rm", "Remove VMs from cluster module", "cluster"),
    CatalogueEntry("cluster.vlcm.enable", "Enable vLCM on cluster (irreversible)", "cluster"),
    CatalogueEntry("cluster.vlcm.info", "Display software management status of cluster", "cluster"),
    CatalogueEntry("cluster.draft.create", "Create new software draft", "cluster"),
    CatalogueEntry("cluster.draft.info", "Display software draft details", "cluster"),
    CatalogueEntry("cluster.draft.ls", "List software drafts", "cluster"),
    CatalogueEntry("cluster.draft.rm", "Discard software draft", "cluster"),
    CatalogueEntry("cluster.draft.commit", "Commit software draft", "cluster"),
    CatalogueEntry("cluster.draft.baseimage.info", "Display base image version of software draft", "cluster"),
    CatalogueEntry("cluster.draft.baseimage.set", "Set ESXi base image on software draft", "cluster"),
    CatalogueEntry("cluster.draft.component.add", "Add component to software draft", "cluster"),
    CatalogueEntry("cluster.draft.component.info", "Display component details in software draft", "cluster"),
    CatalogueEntry("cluster.draft.component.ls", "List components in software draft", "cluster"),
    CatalogueEntry("cluster.draft.component.rm", "Remove component from software draft", "cluster"),

    # Datacenter
    CatalogueEntry("datacenter.create", "Create datacenter", "datacenter"),
    CatalogueEntry("datacenter.info", "Display datacenter info", "datacenter"),

    # Datastore
    CatalogueEntry("datastore.info", "Display info for datastores", "datastore"),
    CatalogueEntry("datastore.ls", "List files on datastore", "datastore"),
    CatalogueEntry("datastore.create", "Create datastore on host", "datastore"),
    CatalogueEntry("datastore.remove", "Remove datastore from host", "datastore"),
    CatalogueEntry("datastore.mkdir", "Create directory on datastore", "datastore"),
    CatalogueEntry("datastore.rm", "Remove file from datastore", "datastore"),
    CatalogueEntry("datastore.mv", "Move file on datastore", "datastore"),
    CatalogueEntry("datastore.cp", "Copy file on datastore", "datastore"),
    CatalogueEntry("datastore.upload", "Upload file to datastore", "datastore"),
    CatalogueEntry("datastore.download", "Download file from datastore", "datastore"),
    CatalogueEntry("datastore.tail", "Output last part of datastore files", "datastore"),
    CatalogueEntry("datastore.maintenance.enter", "Put datastore in maintenance mode", "datastore"),
    CatalogueEntry("datastore.maintenance.exit", "Take datastore out of maintenance mode", "datastore"),
    CatalogueEntry("datastore.cluster.info", "Display datastore cluster info", "datastore"),
    CatalogueEntry("datastore.cluster.change", "Change datastore cluster configuration", "datastore"),
    CatalogueEntry("datastore.disk.create", "Create VMDK on datastore", "datastore"),
    CatalogueEntry("datastore.disk.extend", "Extend VMDK on datastore", "datastore"),
    CatalogueEntry("datastore.disk.inflate", "Inflate VMDK on datastore", "datastore"),
    CatalogueEntry("datastore.disk.info", "Query VMDK info on datastore", "datastore"),
    CatalogueEntry("datastore.disk.shrink", "Shrink VMDK on datastore", "datastore"),
    CatalogueEntry("datastore.vsan.dom.ls", "List vSAN DOM objects", "datastore"),
    CatalogueEntry("datastore.vsan.dom.rm", "Remove vSAN DOM objects", "datastore"),

    # Disk (First Class Disk / CNS)
    CatalogueEntry("disk.attach", "Attach disk ID on VM", "disk"),
    CatalogueEntry("disk.create", "Create first class disk", "disk"),
    CatalogueEntry("disk.detach", "Detach disk ID from VM", "disk"),
    CatalogueEntry("disk.ls", "List first class disk IDs", "disk"),
    CatalogueEntry("disk.register", "Register existing disk", "disk"),
    CatalogueEntry("disk.rm", "Remove first class disk", "disk"),
    CatalogueEntry("disk.metadata.ls", "List metadata for disk", "disk"),
    CatalogueEntry("disk.metadata.update", "Update metadata for disk", "disk"),
    CatalogueEntry("disk.snapshot.create", "Create snapshot of disk", "disk"),
    CatalogueEntry("disk.snapshot.ls", "List snapshots for disk", "disk"),
    CatalogueEntry("disk.snapshot.rm", "Remove disk snapshot", "disk"),
    CatalogueEntry("disk.tags.attach", "Attach tag to disk", "disk"),
    CatalogueEntry("disk.tags.detach", "Detach tag from disk", "disk"),

    # Network (DVS)
    CatalogueEntry("dvs.add", "Add hosts to DVS", "network"),
    CatalogueEntry("dvs.change", "Change DVS properties (MTU, discovery)", "network"),
    CatalogueEntry("dvs.create", "Create DistributedVirtualSwitch", "network"),
    CatalogueEntry("dvs.portgroup.add", "Add portgroup to DVS", "network"),
    CatalogueEntry("dvs.portgroup.change", "Change DVS portgroup configuration", "network"),
    CatalogueEntry("dvs.portgroup.info", "Portgroup info for DVS", "network"),

    # Firewall
    CatalogueEntry("firewall.ruleset.find", "Find firewall rulesets matching given rule", "network"),

    # Guest Operations
    CatalogueEntry("guest.chmod", "Change file MODE on VM guest", "guest"),
    CatalogueEntry("guest.chown", "Change file UID/GID on VM guest", "guest"),
    CatalogueEntry("guest.df", "Report file system disk space usage on VM", "guest"),
    CatalogueEntry("guest.download", "Copy file from VM guest to local", "guest"),
    CatalogueEntry("guest.getenv", "Read environment variables from VM", "guest"),
    CatalogueEntry("guest.kill", "Kill process on VM guest", "guest"),
    CatalogueEntry("guest.ls", "List files in VM guest", "guest"),
    CatalogueEntry("guest.mkdir", "Create directory in VM guest", "guest"),
    CatalogueEntry("guest.mktemp", "Create temporary file or directory in VM", "guest"),
    CatalogueEntry("guest.mv", "Move/rename files in VM guest", "guest"),
    CatalogueEntry("guest.ps", "List processes in VM guest", "guest"),
    CatalogueEntry("guest.rm", "Remove file in VM guest", "guest"),
    CatalogueEntry("guest.rmdir", "Remove directory in VM guest", "guest"),
    CatalogueEntry("guest.run", "Run program in VM and display output", "guest"),
    CatalogueEntry("guest.start", "Start program in VM (async)", "guest"),
    CatalogueEntry("guest.touch", "Change file times on VM guest", "guest"),
    CatalogueEntry("guest.upload", "Copy file from local to VM guest", "guest"),

    # Resource Pool
    CatalogueEntry("pool.change", "Change resource pool configuration", "pool"),
    CatalogueEntry("pool.create", "Create resource pool", "pool"),
    CatalogueEntry("pool.destroy", "Destroy resource pool", "pool"),
    CatalogueEntry("pool.info", "Display resource pool info", "pool"),

    # Folder
    CatalogueEntry("folder.create", "Create folder", "folder"),
    CatalogueEntry("folder.info", "Display folder info", "folder"),
    CatalogueEntry("folder.place", "Get placement recommendation for existing VM", "folder"),

    # Object
    CatalogueEntry("object.destroy", "Destroy managed objects", "object"),
    CatalogueEntry("object.method", "Enable or disable methods for managed objects", "object"),
    CatalogueEntry("object.mv", "Move managed entities to folder", "object"),
    CatalogueEntry("object.reload", "Reload managed object state", "object"),
    CatalogueEntry("object.rename", "Rename managed objects", "object"),
    CatalogueEntry("object.save", "Save managed objects (for vcsim)", "object"),

    # Permissions
    CatalogueEntry("permissions.ls", "List permissions on managed entities", "permissions"),
    CatalogueEntry("permissions.set", "Set permissions on managed entities", "permissions"),
    CatalogueEntry("permissions.remove", "Remove permission from managed entities", "permissions"),

    # Role
    CatalogueEntry("role.create", "Create authorization role", "permissions"),
    CatalogueEntry("role.ls", "List authorization roles", "permissions"),
    CatalogueEntry("role.remove", "Remove authorization role", "permissions"),
    CatalogueEntry("role.update", "Update authorization role privileges", "permissions"),
    CatalogueEntry("role.usage", "List usage for role", "permissions"),

    # Tags
    CatalogueEntry("tags.attach", "Attach tag to object", "tags"),
    CatalogueEntry("tags.attached.ls", "List attached tags or objects", "tags"),
    CatalogueEntry("tags.create", "Create tag", "tags"),
    CatalogueEntry("tags.detach", "Detach tag from object", "tags"),
    CatalogueEntry("tags.info", "Display tag info", "tags"),
    CatalogueEntry("tags.ls", "List tags", "tags"),
    CatalogueEntry("tags.rm", "Delete tag", "tags"),
    CatalogueEntry("tags.update", "Update tag", "tags"),
    CatalogueEntry("tags.category.create", "Create tag category", "tags"),
    CatalogueEntry("tags.category.info", "Display tag category info", "tags"),
    CatalogueEntry("tags.category.ls", "List tag categories", "tags"),
    CatalogueEntry("tags.category.rm", "Delete tag category", "tags"),
    CatalogueEntry("tags.category.update", "Update tag category", "tags"),

    # Content Library
    CatalogueEntry("library.checkin", "Check in VM to Content Library item", "library"),
    CatalogueEntry("library.checkout", "Check out Content Library item to VM", "library"),
    CatalogueEntry("library.clone", "Clone VM to Content Library", "library"),
    CatalogueEntry("library.cp", "Copy library item to another library", "library"),
    CatalogueEntry("library.create", "Create content library", "library"),
    CatalogueEntry("library.deploy", "Deploy library OVF template", "library"),
    CatalogueEntry("library.evict", "Evict library or item", "library"),
    CatalogueEntry("library.export", "Export library items", "library"),
    CatalogueEntry("library.import", "Import library items", "library"),
    CatalogueEntry("library.info", "Display library information", "library"),
    CatalogueEntry("library.ls", "List libraries, items, and files", "library"),
    CatalogueEntry("library.policy.ls", "List security policies for content libraries", "library"),
    CatalogueEntry("library.publish", "Publish library to subscribers", "library"),
    CatalogueEntry("library.rm", "Delete library or item", "library"),
    CatalogueEntry("library.sync", "Sync library or item", "library"),
    CatalogueEntry("library.update", "Update library or item", "library"),
    CatalogueEntry("library.vmtx.info", "Display VMTX template details", "library"),
    CatalogueEntry("library.session.ls", "List library item update sessions", "library"),
    CatalogueEntry("library.session.rm", "Remove library item update session", "library"),
    CatalogueEntry("library.subscriber.create", "Create library subscriber", "library"),
    CatalogueEntry("library.subscriber.info", "Library subscriber info", "library"),
    CatalogueEntry("library.subscriber.ls", "List library subscriptions", "library"),
    CatalogueEntry("library.subscriber.rm", "Delete library subscription", "library"),
    CatalogueEntry("library.trust.create", "Add certificate to library trust store", "library"),
    CatalogueEntry("library.trust.info", "Display trusted certificate info", "library"),
    CatalogueEntry("library.trust.ls", "List trusted certificates", "library"),
    CatalogueEntry("library.trust.rm", "Remove trusted certificate", "library"),

    # Events / Tasks / Logs
    CatalogueEntry("events", "Display events", "monitoring"),
    CatalogueEntry("tasks", "Display info for recent tasks", "monitoring"),
    CatalogueEntry("task.cancel", "Cancel task", "monitoring"),
    CatalogueEntry("logs", "View VPX and ESX logs", "monitoring"),
    CatalogueEntry("logs.ls", "List diagnostic log keys", "monitoring"),
    CatalogueEntry("logs.download", "Generate diagnostic bundles", "monitoring"),
    CatalogueEntry("alarms", "Show triggered or declared alarms", "monitoring"),
    CatalogueEntry("alarm.info", "Alarm definition info", "monitoring"),

    # Metrics
    CatalogueEntry("metric.change", "Change counter levels", "metric"),
    CatalogueEntry("metric.info", "Metric info", "metric"),
    CatalogueEntry("metric.interval.change", "Change historical metric intervals", "metric"),
    CatalogueEntry("metric.interval.info", "List historical metric intervals", "metric"),
    CatalogueEntry("metric.ls", "List available metrics", "metric"),
    CatalogueEntry("metric.reset", "Reset counter to default level", "metric"),
    CatalogueEntry("metric.sample", "Sample metric for object", "metric"),

    # Session
    CatalogueEntry("session.login", "Session login", "session"),
    CatalogueEntry("session.logout", "Session logout", "session"),
    CatalogueEntry("session.ls", "List active sessions", "session"),
    CatalogueEntry("session.rm", "Remove active session", "session"),

    # SSO
    CatalogueEntry("sso.group.create", "Create SSO group", "sso"),
    CatalogueEntry("sso.group.ls", "List SSO groups", "sso"),
    CatalogueEntry("sso.group.rm", "Remove SSO group", "sso"),
    CatalogueEntry("sso.group.update", "Update SSO group", "sso"),
    CatalogueEntry("sso.user.create", "Create SSO user", "sso"),
    CatalogueEntry("sso.user.id", "Print SSO user and group IDs", "sso"),
    CatalogueEntry("sso.user.ls", "List SSO users", "sso"),
    CatalogueEntry("sso.user.rm", "Remove SSO user", "sso"),
    CatalogueEntry("sso.user.update", "Update SSO user", "sso"),
    CatalogueEntry("sso.idp.ls", "List SSO identity provider sources", "sso"),
    CatalogueEntry("sso.idp.default.ls", "List SSO default identity provider sources", "sso"),
    CatalogueEntry("sso.idp.default.update", "Set SSO default identity provider source", "sso"),
    CatalogueEntry("sso.idp.ldap.update", "Update SSO LDAP identity provider", "sso"),
    CatalogueEntry("sso.lpp.info", "Get SSO local password policy", "sso"),
    CatalogueEntry("sso.lpp.update", "Update SSO local password policy", "sso"),
    CatalogueEntry("sso.service.ls", "List SSO platform services", "sso"),

    # License
    CatalogueEntry("license.add", "Add license key", "license"),
    CatalogueEntry("license.assign", "Assign license to host or cluster", "license"),
    CatalogueEntry("license.assigned.ls", "List assigned licenses", "license"),
    CatalogueEntry("license.decode", "Decode license key", "license"),
    CatalogueEntry("license.label.set", "Set license label", "license"),
    CatalogueEntry("license.ls", "List licenses", "license"),
    CatalogueEntry("license.remove", "Remove license key", "license"),

    # Storage Policy
    CatalogueEntry("storage.policy.create", "Create VM storage policy", "storage"),
    CatalogueEntry("storage.policy.info", "VM storage policy info", "storage"),
    CatalogueEntry("storage.policy.ls", "List VM storage policies", "storage"),
    CatalogueEntry("storage.policy.rm", "Remove storage policy", "storage"),

    # Import / Export
    CatalogueEntry("import.ova", "Import OVA", "import"),
    CatalogueEntry("import.ovf", "Import OVF", "import"),
    CatalogueEntry("import.spec", "Generate OVF/OVA import spec", "import"),
    CatalogueEntry("import.vmdk", "Import VMDK to datastore", "import"),
    CatalogueEntry("export.ovf", "Export VM as OVF", "import"),

    # Extension
    CatalogueEntry("extension.info", "Display extension info", "extension"),
    CatalogueEntry("extension.register", "Register extension", "extension"),
    CatalogueEntry("extension.setcert", "Set extension certificate", "extension"),
    CatalogueEntry("extension.unregister", "Unregister extension", "extension"),

    # Custom Fields
    CatalogueEntry("fields.add", "Add custom field type", "fields"),
    CatalogueEntry("fields.info", "Display custom field values", "fields"),
    CatalogueEntry("fields.ls", "List custom field definitions", "fields"),
    CatalogueEntry("fields.rename", "Rename custom field", "fields"),
    CatalogueEntry("fields.rm", "Remove custom field", "fields"),
    CatalogueEntry("fields.set", "Set custom field values", "fields"),

    # Options
    CatalogueEntry("option.ls", "List vCenter options", "option"),
    CatalogueEntry("option.set", "Set vCenter option", "option"),

    # KMS
    CatalogueEntry("kms.add", "Add KMS cluster", "kms"),
    CatalogueEntry("kms.default", "Set default KMS cluster", "kms"),
    CatalogueEntry("kms.export", "Export KMS cluster for backup", "kms"),
    CatalogueEntry("kms.ls", "Display KMS info", "kms"),
    CatalogueEntry("kms.rm", "Remove KMS server or cluster", "kms"),
    CatalogueEntry("kms.trust", "Establish trust between KMS and vCenter", "kms"),

    # GPU
    CatalogueEntry("gpu.host.info", "Display GPU information for a host", "gpu"),
    CatalogueEntry("gpu.host.profile.ls", "List available vGPU profiles on host", "gpu"),
    CatalogueEntry("gpu.vm.add", "Add vGPU to VM", "gpu"),
    CatalogueEntry("gpu.vm.info", "Display GPU information for a VM", "gpu"),
    CatalogueEntry("gpu.vm.remove", "Remove all vGPUs from VM", "gpu"),

    # Namespace
    CatalogueEntry("namespace.cluster.disable", "Disable vSphere Namespaces on cluster", "namespace"),
    CatalogueEntry("namespace.cluster.enable", "Enable vSphere Namespaces on cluster", "namespace"),
    CatalogueEntry("namespace.cluster.ls", "List namespace enabled clusters", "namespace"),
    CatalogueEntry("namespace.create", "Create vSphere Namespace on Supervisor", "namespace"),
    CatalogueEntry("namespace.info", "Display vSphere Namespace details", "namespace"),
    CatalogueEntry("namespace.ls", "List vSphere Namespaces", "namespace"),
    CatalogueEntry("namespace.rm", "Delete vSphere Namespace", "namespace"),
    CatalogueEntry("namespace.update", "Modify vSphere Namespace", "namespace"),
    CatalogueEntry("namespace.registervm", "Register existing VM as VM Service managed", "namespace"),
    CatalogueEntry("namespace.logs.download", "Download namespace cluster support bundle", "namespace"),
    CatalogueEntry("namespace.vmclass.create", "Create virtual machine class", "namespace"),
    CatalogueEntry("namespace.vmclass.info", "Display virtual machine class details", "namespace"),
    CatalogueEntry("namespace.vmclass.ls", "List virtual machine classes", "namespace"),
    CatalogueEntry("namespace.vmclass.rm", "Delete virtual machine class", "namespace"),
    CatalogueEntry("namespace.vmclass.update", "Modify virtual machine class", "namespace"),
    CatalogueEntry("namespace.service.activate", "Activate Supervisor Service", "namespace"),
    CatalogueEntry("namespace.service.create", "Register Supervisor Service version", "namespace"),
    CatalogueEntry("namespace.service.deactivate", "Deactivate Supervisor Service", "namespace"),
    CatalogueEntry("namespace.service.info", "Get Supervisor Service info", "namespace"),
    CatalogueEntry("namespace.service.ls", "List Supervisor Services", "namespace"),
    CatalogueEntry("namespace.service.rm", "Remove Supervisor Service", "namespace"),
    CatalogueEntry("namespace.service.version.activate", "Activate Supervisor Service version", "namespace"),
    CatalogueEntry("namespace.service.version.create", "Register new Supervisor Service version", "namespace"),
    CatalogueEntry("namespace.service.version.deactivate", "Deactivate Supervisor Service version", "namespace"),
    CatalogueEntry("namespace.service.version.info", "Get Supervisor Service version info", "namespace"),
    CatalogueEntry("namespace.service.version.ls", "List Supervisor Service versions", "namespace"),
    CatalogueEntry("namespace.service.version.rm", "Remove Supervisor Service version", "namespace"),

    # vApp
    CatalogueEntry("vapp.destroy", "Destroy vApp", "vapp"),
    CatalogueEntry("vapp.power", "Power on/off/suspend vApp", "vapp"),

    # VCSA
    CatalogueEntry("vcsa.access.consolecli.get", "Get console CLI enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.consolecli.set", "Set console CLI enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.dcui.get", "Get DCUI enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.dcui.set", "Set DCUI enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.shell.get", "Get BASH shell enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.shell.set", "Set BASH shell enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.ssh.get", "Get SSH enabled state", "vcsa"),
    CatalogueEntry("vcsa.access.ssh.set", "Set SSH enabled state", "vcsa"),
    CatalogueEntry("vcsa.log.forwarding.info", "Retrieve VCSA log forwarding configuration", "vcsa"),
    CatalogueEntry("vcsa.net.proxy.info", "Retrieve VCSA networking proxy configuration", "vcsa"),
    CatalogueEntry("vcsa.shutdown.cancel", "Cancel pending shutdown action", "vcsa"),
    CatalogueEntry("vcsa.shutdown.get", "Get pending shutdown details", "vcsa"),
    CatalogueEntry("vcsa.shutdown.poweroff", "Power off the appliance", "vcsa"),
    CatalogueEntry("vcsa.shutdown.reboot", "Reboot the appliance", "vcsa"),

    # vSAN
    CatalogueEntry("vsan.change", "Change vSAN configuration (unmap, file-service)", "vsan"),
    CatalogueEntry("vsan.info", "Display vSAN configuration", "vsan"),

    # Volume (CNS)
    CatalogueEntry("volume.extend", "Extend CNS volume", "volume"),
    CatalogueEntry("volume.ls", "List CNS volumes", "volume"),
    CatalogueEntry("volume.rm", "Remove CNS volume", "volume"),
    CatalogueEntry("volume.snapshot.create", "Create snapshot of CNS volume", "volume"),
    CatalogueEntry("volume.snapshot.ls", "List CNS volume snapshots", "volume"),
    CatalogueEntry("volume.snapshot.rm", "Remove CNS volume snapshot", "volume"),

    # vLCM
    CatalogueEntry("vlcm.depot.baseimages.ls", "List available ESXi base images", "vlcm"),
    CatalogueEntry("vlcm.depot.offline.create", "Create offline image depot", "vlcm"),
    CatalogueEntry("vlcm.depot.offline.info", "Display offline image depot contents", "vlcm"),
    CatalogueEntry("vlcm.depot.offline.ls", "List offline image depots", "vlcm"),
    CatalogueEntry("vlcm.depot.offline.rm", "Delete offline image depot", "vlcm"),
)


def load_catalogue() -> tuple[CatalogueEntry, ...]:
    """Return the full command catalogue."""
    return COMMAND_INDEX
