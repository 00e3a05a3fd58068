# Basic usage example

from rbd_bridge import RBDClient, RBDConfig, RBDError
from rbd_bridge.utils import configure_logging_from_config


def main():
    # RBD_* environment variables override defaults
    config = RBDConfig.from_env()
    configure_logging_from_config(config)

    client = RBDClient(config=config)

    try:
        print(f"Monitors: {[str(ip) for ip in client.monitor_ips()]}")

        for pool in client.list_pools():
            print(f"Pool {pool}:")
            for image in client.list_images(pool):
                print(f"  {image.name}: {image.size_gib():.1f} GiB (format {image.format})")

        if client.get_image_info("rbd", "demo-001") is None:
            client.create_image("rbd", "demo-001", size_gb=1)
            print("✓ Image created: rbd/demo-001")

        device = client.map_image("rbd", "demo-001")
        print(f"✓ Mapped to {device}")
        print(f"  In use: {client.has_watchers('rbd', 'demo-001')}")
        print(f"  Mapped devices: {client.get_mapped_devices()}")

        client.unmap_device(device)
        client.remove_image("rbd", "demo-001")
        print("✓ Cleaned up")

    except RBDError as e:
        print(f"\n❗ Error: {e}")

    print(f"Invocations: {client.metrics()}")


if __name__ == "__main__":
    main()
