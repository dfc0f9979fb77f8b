import logging

from xsrf_client import extract_token

logging.basicConfig(level="DEBUG")


def main():
    # Raw document.cookie style string
    print(extract_token("XSRF-TOKEN=", "A=1;XSRF-TOKEN=abc123;B=2"))

    # Structured flags handed over by the host page
    print(extract_token("XSRF-TOKEN=", {"cookie": "XSRF-TOKEN=abc123", "locale": "en"}))

    # Missing cookie field degrades to None
    print(extract_token("XSRF-TOKEN=", {"other": "field"}))


if __name__ == "__main__":
    main()
