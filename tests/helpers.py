def stored_blobs(directory):
    if not directory.exists():
        return []
    return sorted(p.name for p in directory.iterdir() if p.is_file())


def read_streaming(response):
    try:
        return b"".join(response.streaming_content)
    finally:
        response.close()
