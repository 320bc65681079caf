# capture_server.py
import socket, threading

HOST, PORT = "127.0.0.1", 8080


def handle(conn, addr):
    received = b""
    with conn:
        print(f"[JOIN] {addr}")
        while True:
            data = conn.recv(4096)
            if not data:
                break
            received += data
            print(f"[RECV] {data.hex(' ')}")
    print(f"[LEAVE] {addr} {len(received)} bytes")
    return received


def serve():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        s.bind((HOST, PORT))
        s.listen()
        print(f"[LISTEN] {HOST}:{PORT}")
        try:
            while True:
                conn, addr = s.accept()
                threading.Thread(target=handle, args=(conn, addr), daemon=True).start()
        except KeyboardInterrupt:
            print("[CLOSE] server")


if __name__ == "__main__":
    serve()
