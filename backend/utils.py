# utils.py  — alert headers the frontend reads to show toast messages
from config import APP_NAME


def create_alert(message: str, param: str) -> dict:
    return {
        f"X-{APP_NAME}-alert": message,
        f"X-{APP_NAME}-params": param,
    }

def create_entity_creation_alert(entity_name: str, param: str) -> dict:
    return create_alert(f"{APP_NAME}.{entity_name}.created", param)

def create_entity_update_alert(entity_name: str, param: str) -> dict:
    return create_alert(f"{APP_NAME}.{entity_name}.updated", param)

def create_entity_deletion_alert(entity_name: str, param: str) -> dict:
    return create_alert(f"{APP_NAME}.{entity_name}.deleted", param)

def create_failure_alert(entity_name: str, error_key: str) -> dict:
    return {
        f"X-{APP_NAME}-error": f"error.{error_key}",
        f"X-{APP_NAME}-params": entity_name,
    }
