"""
Tests for the resource services: paths, methods, payloads and decoding.
"""

import pytest

from xelon_sdk import XelonEmptyArgumentError, XelonEmptyPayloadError
from xelon_sdk.models import (
    DeviceAddDiskRequest,
    DeviceCreateNetwork,
    DeviceCreateRequest,
    DeviceDeleteDiskRequest,
    DeviceListOptions,
    DeviceUpdateDiskRequest,
    DeviceUpdateHardwareRequest,
    DeviceUpdateRequest,
    ISOCreateRequest,
    ISOUpdateRequest,
    ListOptions,
    LoadBalancerClusterCreateRequest,
    LoadBalancerClusterForwardingRule,
    LoadBalancerClusterForwardingRuleBackend,
    LoadBalancerClusterForwardingRuleFrontend,
    LoadBalancerClusterForwardingRuleUpdateRequest,
    LoadBalancerClusterNodesSpec,
    LoadBalancerCreateRequest,
    LoadBalancerForwardingRule,
    LoadBalancerUpdateAssignedDevicesRequest,
    LoadBalancerUpdateRequest,
    NetworkLANCreateRequest,
    NetworkLANUpdateRequest,
    NetworkWANCreateRequest,
    PersistentStorageCreateRequest,
    SSHKeyCreateRequest,
    TemplateCreateRequest,
    TemplateListOptions,
    TemplateUpdateRequest,
    TenantListOptions,
)


class TestCloudsService:
    def test_list(self, api, client):
        api.route("GET", "hv/list/tenant-1", [{"id": 1, "display_name": "Zurich", "type": 1}])

        clouds, _ = client.clouds.list("tenant-1")

        assert clouds[0].id == 1
        assert clouds[0].name == "Zurich"

    def test_tenant_is_required(self, api, client):
        with pytest.raises(XelonEmptyArgumentError):
            client.clouds.list("")


class TestDevicesService:
    """Tests for the device endpoints."""

    def test_list_with_options(self, api, client):
        api.route(
            "GET",
            "devices",
            {
                "data": [{"identifier": "d1", "displayName": "web-1", "isPoweredOn": True}],
                "meta": {"currentPage": 1, "lastPage": 1, "perPage": 20, "total": 1},
            },
        )

        devices, response = client.devices.list(
            DeviceListOptions(search="web", pagination=ListOptions(per_page=20))
        )

        assert devices[0].display_name == "web-1"
        assert devices[0].powered_on is True
        assert response.meta.total == 1
        assert api.last_request.query == "per_page=20&search=web"

    def test_list_with_empty_body(self, api, client):
        api.route("GET", "devices", status=200)

        devices, response = client.devices.list()

        assert devices == []
        assert response.meta is None

    def test_get(self, api, client):
        api.route(
            "GET",
            "devices/d1",
            {"identifier": "d1", "cpu": 4, "ram": 8, "tenant": {"identifier": "t1"}, "extra": 1},
        )

        device, _ = client.devices.get("d1")

        assert device.cpu_cores == 4
        assert device.tenant.id == "t1"
        assert device._extra_fields == {"extra": 1}

    def test_create(self, api, client):
        api.route("POST", "devices", {"data": {"identifier": "d2"}, "message": "created"})
        create_request = DeviceCreateRequest(
            cpu_cores=2,
            disk_size=50,
            display_name="db-1",
            host_name="db1",
            password="secret",
            password_confirmation="secret",
            ram=4,
            swap_disk_size=1,
            template_id="tpl-1",
            tenant_id="t1",
            networks=[DeviceCreateNetwork(network_id="net-1", connect_on_power_on=True)],
        )

        device, _ = client.devices.create(create_request)

        assert device.id == "d2"
        sent = api.last_request.json()
        assert sent["networks"] == [{"networkId": "net-1", "connectOnPowerOn": True}]
        assert sent["templateId"] == "tpl-1"

    def test_update_and_hardware(self, api, client):
        api.route("PUT", "devices/d1", {"data": {"identifier": "d1", "displayName": "renamed"}})
        api.route("PUT", "devices/d1/hardware", {"data": {"identifier": "d1", "cpu": 8}})

        device, _ = client.devices.update("d1", DeviceUpdateRequest(display_name="renamed"))
        assert device.display_name == "renamed"

        device, _ = client.devices.update_hardware(
            "d1", DeviceUpdateHardwareRequest(cpu_cores=8, ram=16)
        )
        assert device.cpu_cores == 8
        assert api.last_request.json() == {"cpu": 8, "ram": 16}

    @pytest.mark.parametrize(
        "method, path, call",
        [
            ("DELETE", "devices/d1", lambda c: c.devices.delete("d1")),
            ("POST", "devices/d1/start", lambda c: c.devices.start("d1")),
            ("POST", "devices/d1/stop", lambda c: c.devices.stop("d1")),
        ],
    )
    def test_actions_without_body(self, api, client, method, path, call):
        api.route(method, path, status=204)

        response = call(client)

        assert response.status_code == 204
        assert api.last_request.body == b""

    def test_disks(self, api, client):
        api.route("POST", "devices/d1/disk", status=202)
        api.route("PUT", "devices/d1/disk", status=202)
        api.route("DELETE", "devices/d1/disk", status=202)

        client.devices.add_disk("d1", DeviceAddDiskRequest(size=10))
        assert api.last_request.json() == {"size": 10}

        client.devices.update_disk(
            "d1", DeviceUpdateDiskRequest(disk_id="disk-1", size=20, extend_partition=True)
        )
        assert api.last_request.json() == {"diskId": "disk-1", "size": 20, "extendPartition": True}

        client.devices.delete_disk("d1", DeviceDeleteDiskRequest(disk_id="disk-1"))
        assert api.last_request.method == "DELETE"
        assert api.last_request.json() == {"diskId": "disk-1"}

    def test_validation_happens_before_io(self, api, client):
        with pytest.raises(XelonEmptyArgumentError, match="failed to get device: id must be supplied"):
            client.devices.get("")
        with pytest.raises(XelonEmptyPayloadError, match="failed to create device"):
            client.devices.create(None)
        with pytest.raises(XelonEmptyArgumentError, match="failed to start device"):
            client.devices.start(None)
        with pytest.raises(XelonEmptyPayloadError, match="failed to delete disk"):
            client.devices.delete_disk("d1", None)

        assert api.requests == []


class TestISOsService:
    def test_crud(self, api, client):
        api.route("GET", "isos", {"data": [{"identifier": "iso-1", "name": "debian"}], "meta": {"total": 1}})
        api.route("GET", "isos/iso-1", {"identifier": "iso-1", "active": True})
        api.route("POST", "isos", {"data": {"identifier": "iso-2"}})
        api.route("PATCH", "isos/iso-1", {"data": {"identifier": "iso-1", "name": "renamed"}})
        api.route("DELETE", "isos/iso-1", status=204)

        isos, response = client.isos.list()
        assert isos[0].name == "debian"
        assert response.meta.total == 1

        iso, _ = client.isos.get("iso-1")
        assert iso.active is True

        iso, _ = client.isos.create(
            ISOCreateRequest(category_id=1, cloud_id="c1", name="alpine", url="https://example.com/a.iso")
        )
        assert iso.id == "iso-2"

        iso, _ = client.isos.update(
            "iso-1", ISOUpdateRequest(category_id=2, description="", name="renamed")
        )
        assert iso.name == "renamed"
        assert api.last_request.method == "PATCH"
        assert api.last_request.json() == {"categoryId": 2, "description": "", "name": "renamed"}

        assert client.isos.delete("iso-1").status_code == 204


class TestKubernetesService:
    def test_clusters_and_pools(self, api, client):
        api.route(
            "GET",
            "kubernetes-talos/clusters",
            [{"clusterIdentifier": "k1", "name": "prod", "hv_system": {"id": 1}, "health": {"health": "ok"}}],
        )
        api.route(
            "GET",
            "kubernetes-talos/k1/cluster-control-planes",
            {"control_plane_cpu": 2, "nodes": [{"identifier": "n1", "localvmid": "vm-1"}]},
        )
        api.route(
            "GET",
            "kubernetes-talos/k1/cluster-pools",
            [{"identifier": "p1", "cpu": 4, "nodes": [{"identifier": "n2", "status": "ready"}]}],
        )

        clusters, _ = client.kubernetes.list()
        assert clusters[0].id == "k1"
        assert clusters[0].cloud.id == 1
        assert clusters[0].health.health == "ok"

        control_plane, _ = client.kubernetes.list_control_planes("k1")
        assert control_plane.cpu_core_count == 2
        assert control_plane.nodes[0].local_vm_id == "vm-1"

        pools, _ = client.kubernetes.list_cluster_pools("k1")
        assert pools[0].nodes[0].status == "ready"

    def test_nodes(self, api, client):
        api.route("POST", "kubernetes-talos/k1/add-node/p1", {"success": "true", "message": "queued"})
        api.route("DELETE", "kubernetes-talos/k1/delete-node/n1", {"success": "true"})

        result, _ = client.kubernetes.add_cluster_node("k1", "p1")
        assert result.message == "queued"

        result, _ = client.kubernetes.delete_cluster_node("k1", "n1")
        assert result.success == "true"

        with pytest.raises(XelonEmptyArgumentError):
            client.kubernetes.add_cluster_node("k1", "")


class TestLoadBalancerClustersService:
    """Tests for the load balancer cluster endpoints."""

    def test_clusters(self, api, client):
        api.route("GET", "load-balancer-clusters", [{"identifier": "lbc-1", "nodes": ["a", "b"]}])
        api.route("GET", "load-balancer-clusters/lbc-1", {"identifier": "lbc-1", "status": "ready"})
        api.route(
            "POST", "load-balancer-clusters", {"identifier": "lbc-2", "status": "provisioning"}
        )
        api.route("DELETE", "load-balancer-clusters/lbc-1", status=204)

        clusters, _ = client.load_balancer_clusters.list()
        assert clusters[0].nodes == ["a", "b"]

        cluster, _ = client.load_balancer_clusters.get("lbc-1")
        assert cluster.status == "ready"

        created, _ = client.load_balancer_clusters.create(
            LoadBalancerClusterCreateRequest(
                cloud_id=1,
                kubernetes_cluster_id="k1",
                name="lbc",
                nodes_spec=LoadBalancerClusterNodesSpec(cpu_core_count=2, disk=20, memory=4),
            )
        )
        assert created.load_balancer_cluster_id == "lbc-2"
        assert api.last_request.json()["nodesSpec"] == {"cpuCoreCount": 2, "disk": 20, "memory": 4}

        client.load_balancer_clusters.delete("lbc-1")
        assert api.last_request.method == "DELETE"

    def test_virtual_ips_and_forwarding_rules(self, api, client):
        base = "load-balancer-clusters/lbc-1/virtual-ips"
        api.route("GET", base, [{"identifier": "vip-1", "ipAddress": "10.0.0.5"}])
        api.route("GET", f"{base}/vip-1", {"identifier": "vip-1", "state": "assigned"})
        rule_payload = {
            "backend": {"identifier": "b1", "port": 8080, "proxy_protocol": 0},
            "frontend": {"identifier": "f1", "port": 80},
        }
        api.route("GET", f"{base}/vip-1/forwarding-rules", [rule_payload])
        api.route("POST", f"{base}/vip-1/forwarding-rules", [rule_payload])
        api.route("PATCH", f"{base}/vip-1/forwarding-rules/b1", {"message": "updated"})
        api.route("DELETE", f"{base}/vip-1/forwarding-rules/b1", status=204)

        vips, _ = client.load_balancer_clusters.list_virtual_ips("lbc-1")
        assert vips[0].ip_address == "10.0.0.5"

        vip, _ = client.load_balancer_clusters.get_virtual_ip("lbc-1", "vip-1")
        assert vip.state == "assigned"

        rules, _ = client.load_balancer_clusters.list_forwarding_rules("lbc-1", "vip-1")
        assert rules[0].backend.port == 8080

        new_rule = LoadBalancerClusterForwardingRule(
            backend=LoadBalancerClusterForwardingRuleBackend(port=8080),
            frontend=LoadBalancerClusterForwardingRuleFrontend(port=80),
        )
        created, _ = client.load_balancer_clusters.create_forwarding_rules(
            "lbc-1", "vip-1", [new_rule]
        )
        assert api.last_request.json() == [
            {"backend": {"port": 8080, "proxy_protocol": 0}, "frontend": {"port": 80}}
        ]
        assert created[0].frontend.id == "f1"

        result, _ = client.load_balancer_clusters.update_forwarding_rule(
            "lbc-1", "vip-1", "b1", LoadBalancerClusterForwardingRuleUpdateRequest(port=9090)
        )
        assert result.message == "updated"
        assert api.last_request.json() == {"port": 9090}

        client.load_balancer_clusters.delete_forwarding_rule("lbc-1", "vip-1", "b1")
        assert api.last_request.method == "DELETE"

    def test_empty_arguments(self, api, client):
        with pytest.raises(XelonEmptyArgumentError):
            client.load_balancer_clusters.get_virtual_ip("lbc-1", "")
        with pytest.raises(XelonEmptyPayloadError):
            client.load_balancer_clusters.create_forwarding_rules("lbc-1", "vip-1", None)

        assert api.requests == []


class TestLoadBalancersService:
    """Tests for the load balancer endpoints."""

    def test_crud(self, api, client):
        api.route(
            "GET",
            "load-balancers",
            {"data": [{"identifier": "lb-1", "forwardingRules": [{"id": 1, "ip": ["1.2.3.4"], "ports": [80, 8080]}]}]},
        )
        api.route("GET", "load-balancers/lb-1", {"identifier": "lb-1", "health": "healthy"})
        api.route("POST", "load-balancers", {"data": {"identifier": "lb-2"}})
        api.route("PUT", "load-balancers/lb-1", {"data": {"identifier": "lb-1", "name": "renamed"}})
        api.route("DELETE", "load-balancers/lb-1", status=204)

        load_balancers, _ = client.load_balancers.list()
        assert load_balancers[0].forwarding_rules[0].ports == [80, 8080]

        load_balancer, _ = client.load_balancers.get("lb-1")
        assert load_balancer.health_status == "healthy"

        load_balancer, _ = client.load_balancers.create(
            LoadBalancerCreateRequest(
                cloud_id="c1", internal_network_id="net-1", name="lb", tenant_id="t1", type="layer4"
            )
        )
        assert load_balancer.id == "lb-2"
        assert api.last_request.json()["loadBalancingType"] == "layer4"

        load_balancer, _ = client.load_balancers.update("lb-1", LoadBalancerUpdateRequest(name="renamed"))
        assert load_balancer.name == "renamed"

        client.load_balancers.delete("lb-1")

    def test_assigned_devices(self, api, client):
        api.route(
            "GET",
            "load-balancers/lb-1/assignable-devices/net-1",
            {"data": [{"identifier": "d1", "name": "web-1"}]},
        )
        api.route("PUT", "load-balancers/lb-1/assigned-devices", {"data": {"identifier": "lb-1"}})

        devices, _ = client.load_balancers.list_assigned_devices("lb-1", "net-1")
        assert devices[0].name == "web-1"

        response = client.load_balancers.update_assigned_devices(
            "lb-1", LoadBalancerUpdateAssignedDevicesRequest(device_ids=["d1", "d2"])
        )
        assert response.status_code == 200
        assert api.last_request.json() == {"deviceIdentifiers": ["d1", "d2"]}

    def test_forwarding_rules(self, api, client):
        api.route("POST", "load-balancers/lb-1/rules", {"data": {"id": 7, "ports": [443]}})
        api.route("PUT", "load-balancers/lb-1/rules/7", {"data": {"id": 7, "ports": [8443]}})
        api.route("DELETE", "load-balancers/lb-1/rules/7", status=204)

        rule, _ = client.load_balancers.create_forwarding_rule(
            "lb-1", LoadBalancerForwardingRule(ip_addresses=["1.2.3.4"], ports=[443])
        )
        assert rule.id == 7
        assert api.last_request.json() == {"ip": ["1.2.3.4"], "ports": [443]}

        rule, _ = client.load_balancers.update_forwarding_rule(
            "lb-1", 7, LoadBalancerForwardingRule(ports=[8443])
        )
        assert rule.ports == [8443]

        client.load_balancers.delete_forwarding_rule("lb-1", 7)
        assert api.last_request.method == "DELETE"

        with pytest.raises(XelonEmptyArgumentError, match="forwarding rule id must be supplied"):
            client.load_balancers.delete_forwarding_rule("lb-1", 0)


class TestNetworksService:
    """Tests for the network endpoints."""

    def test_list_and_get(self, api, client):
        api.route("GET", "networks", {"data": [{"identifier": "net-1", "type": "LAN"}], "meta": {"total": 1}})
        api.route("GET", "networks/net-1", {"identifier": "net-1", "dns1": "1.1.1.1", "networkSize": 24})

        networks, response = client.networks.list()
        assert networks[0].type == "LAN"
        assert response.meta.total == 1

        network, _ = client.networks.get("net-1")
        assert network.dns_primary == "1.1.1.1"
        assert network.subnet_size == 24

    def test_lan_and_wan(self, api, client):
        api.route("POST", "networks/lan", {"data": {"identifier": "lan-1"}})
        api.route("PATCH", "networks/lan-1/lan", {"identifier": "lan-1", "name": "renamed"})
        api.route("POST", "networks/wan", {"data": {"identifier": "wan-1"}})
        api.route("DELETE", "networks/lan-1", status=204)

        network, _ = client.networks.create_lan(
            NetworkLANCreateRequest(
                cloud_id="c1",
                dns_primary="1.1.1.1",
                gateway="10.0.0.1",
                name="lan",
                network="10.0.0.0",
                network_speed=1000,
                subnet_size=24,
            )
        )
        assert network.id == "lan-1"

        network, _ = client.networks.update_lan(
            "lan-1",
            NetworkLANUpdateRequest(
                dns_primary="1.1.1.1", gateway="10.0.0.1", name="renamed", network="10.0.0.0", network_speed=1000
            ),
        )
        assert network.name == "renamed"
        assert api.last_request.method == "PATCH"

        network, _ = client.networks.create_wan(
            NetworkWANCreateRequest(cloud_id="c1", name="wan", network_speed=1000, subnet_size=29)
        )
        assert network.id == "wan-1"

        client.networks.delete("lan-1")


class TestPersistentStoragesService:
    """Tests for the persistent storage endpoints."""

    def test_crud(self, api, client):
        api.route(
            "GET",
            "persistent-storages",
            {"data": [{"identifier": "ps-1", "capacity": 10, "attachedDevices": [{"identifier": "d1"}]}]},
        )
        api.route("GET", "persistent-storages/ps-1", {"identifier": "ps-1", "formatted": True})
        api.route("POST", "persistent-storages", {"data": {"identifier": "ps-2"}})
        api.route("DELETE", "persistent-storages/ps-1", status=204)

        storages, _ = client.persistent_storages.list()
        assert storages[0].capacity == 10

        storage, _ = client.persistent_storages.get("ps-1")
        assert storage.formatted is True

        storage, _ = client.persistent_storages.create(
            PersistentStorageCreateRequest(name="data", size=10, type=2, cloud_id="c1")
        )
        assert storage.id == "ps-2"
        assert api.last_request.json() == {
            "name": "data", "storageSize": 10, "type": 2, "cloudIdentifier": "c1",
        }

        client.persistent_storages.delete("ps-1")

    def test_device_actions_and_extend(self, api, client):
        api.route("POST", "persistent-storages/ps-1/attach-device", {"message": "attached"})
        api.route("POST", "persistent-storages/ps-1/detach-device", {"message": "detached"})
        api.route("POST", "persistent-storages/ps-1/extend", {"message": "extended"})

        client.persistent_storages.attach_to_device("ps-1", "d1")
        assert api.last_request.json() == {"deviceIdentifier": "d1"}

        client.persistent_storages.detach_from_device("ps-1", "d1")
        assert api.last_request.path == "/persistent-storages/ps-1/detach-device"

        client.persistent_storages.extend("ps-1", 50)
        assert api.last_request.json() == {"diskSize": 50}

        with pytest.raises(XelonEmptyArgumentError, match="device id must be supplied"):
            client.persistent_storages.attach_to_device("ps-1", "")


class TestSSHKeysService:
    def test_list_create_delete(self, api, client):
        api.route("GET", "sshKeys/", [{"id": 1, "name": "laptop", "ssh_key": "ssh-ed25519 AAAA", "fingerprint": "ab:cd"}])
        api.route("POST", "vmlist/ssh/add", {"id": 2, "name": "ci"})
        api.route("DELETE", "vmlist/ssh/2/delete", status=204)

        keys, _ = client.ssh_keys.list()
        assert keys[0].public_key == "ssh-ed25519 AAAA"

        key, _ = client.ssh_keys.create(SSHKeyCreateRequest(name="ci", public_key="ssh-rsa BBBB"))
        assert key.id == 2
        assert api.last_request.json() == {"name": "ci", "ssh_key": "ssh-rsa BBBB"}

        client.ssh_keys.delete(2)
        assert api.last_request.method == "DELETE"


class TestTemplatesService:
    def test_crud(self, api, client):
        api.route("GET", "templates", {"data": [{"identifier": "tpl-1", "type": "public"}]})
        api.route("GET", "templates/tpl-1", {"identifier": "tpl-1", "category": "linux"})
        api.route("POST", "templates/create-from-device", {"data": {"identifier": "tpl-2"}})
        api.route("PATCH", "templates/tpl-1", {"data": {"identifier": "tpl-1", "name": "renamed"}})
        api.route("DELETE", "templates/tpl-1", status=204)

        templates, _ = client.templates.list(TemplateListOptions(type="public"))
        assert templates[0].id == "tpl-1"
        assert api.last_request.query == "type=public"

        template, _ = client.templates.get("tpl-1")
        assert template.category == "linux"

        template, _ = client.templates.create(
            TemplateCreateRequest(device_id="d1", name="golden", tenant_id="t1")
        )
        assert template.id == "tpl-2"
        assert api.last_request.json() == {
            "deviceId": "d1", "name": "golden", "tenantId": "t1", "sendEmail": False,
        }

        template, _ = client.templates.update("tpl-1", TemplateUpdateRequest(name="renamed"))
        assert template.name == "renamed"

        client.templates.delete("tpl-1")


class TestTenantsService:
    def test_get_current(self, api, client):
        api.route("GET", "tenants/current", {"identifier": "t1", "name": "ACME", "status": "active"})

        tenant, _ = client.tenants.get_current()

        assert tenant.id == "t1"
        assert tenant.name == "ACME"

    def test_list(self, api, client):
        api.route(
            "GET",
            "tenants",
            {"data": [{"identifier": "t1"}, {"identifier": "t2"}], "meta": {"current_page": 1, "total": 2}},
        )

        tenants, response = client.tenants.list(TenantListOptions(pagination=ListOptions(page=1)))

        assert [tenant.id for tenant in tenants] == ["t1", "t2"]
        assert response.meta.page == 1
        assert response.meta.total == 2
        assert api.last_request.query == "page=1"
