#!/usr/bin/env python3
"""
03_mqtt_brokers.py - Multi-broker MQTT configuration

Demonstrates:
- Enabling multi-broker mode with MQTT_MULTI_BROKER_ENABLED
- Describing brokers as a JSON array in MQTT_BROKERS (tag, host, transport,
  port, user and password are required per entry)
- Picking the connection tagged "default"
"""

import json

from envkit import MqttConfigs


def main() -> None:
    brokers = [
        {
            "tag": "default",
            "host": "mqtt.internal",
            "transport": "tcp",
            "port": 1883,
            "user": "gateway",
            "password": "secret",
        },
        {
            "tag": "cloud",
            "broker_kind": "aws_iot_core",
            "host": "abc123-ats.iot.us-east-1.amazonaws.com",
            "transport": "ssl",
            "port": 8883,
            "user": "",
            "password": "",
            "device_name": "gateway-1",
            "root_ca_path": "/certs/AmazonRootCA1.pem",
            "cert_path": "/certs/device.pem.crt",
            "private_key_path": "/certs/private.pem.key",
        },
    ]

    mqtt = MqttConfigs.from_environment(
        {"MQTT_MULTI_BROKER_ENABLED": "true", "MQTT_BROKERS": json.dumps(brokers)}
    )

    for connection in mqtt.connection_configs:
        print(f"{connection.tag:<8} {connection.broker_kind:<13} {connection.uri()}")

    print(f"Default connection: {mqtt.default_connection().uri()}")


if __name__ == "__main__":
    main()
