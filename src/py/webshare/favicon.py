import time

# --
# The icon served for `/favicon.ico`, whatever the served directory holds.
# NOTE: The icon is a PNG, browsers accept it with the `image/x-icon` type.

FAVICON_TYPE: str = "image/x-icon"

# Used as the `Last-Modified` date of the icon
FAVICON_TIMESTAMP: float = time.time()

# Generated from `favicon.png`, do not edit.
FAVICON: bytes = (
	b"\x89\x50\x4e\x47\x0d\x0a\x1a\x0a\x00\x00\x00\x0d\x49\x48\x44\x52"
	b"\x00\x00\x00\x40\x00\x00\x00\x40\x10\x04\x00\x00\x00\x50\xf0\x65"
	b"\x16\x00\x00\x00\x04\x67\x41\x4d\x41\x00\x00\xb1\x8f\x0b\xfc\x61"
	b"\x05\x00\x00\x00\x01\x73\x52\x47\x42\x00\xae\xce\x1c\xe9\x00\x00"
	b"\x00\x20\x63\x48\x52\x4d\x00\x00\x7a\x26\x00\x00\x80\x84\x00\x00"
	b"\xfa\x00\x00\x00\x80\xe8\x00\x00\x75\x30\x00\x00\xea\x60\x00\x00"
	b"\x3a\x98\x00\x00\x17\x70\x9c\xba\x51\x3c\x00\x00\x00\x02\x62\x4b"
	b"\x47\x44\xff\xff\x14\xab\x31\xcd\x00\x00\x00\x09\x70\x48\x59\x73"
	b"\x00\x00\x00\x48\x00\x00\x00\x48\x00\x46\xc9\x6b\x3e\x00\x00\x0a"
	b"\xd9\x49\x44\x41\x54\x78\xda\xed\x9b\x69\x70\x54\x55\x1a\x86\x9f"
	b"\x73\x6f\x2f\xe9\x24\x9d\x3d\x21\x34\x21\x80\x11\x02\x86\x48\x92"
	b"\x66\x1b\x20\x04\x04\x29\x01\x11\xc7\xa5\xdc\x10\x65\x86\x88\x8c"
	b"\xe3\x8c\x96\x88\x32\x22\xd6\x20\x2e\x28\x35\xee\x0e\x0e\x83\xa2"
	b"\x38\x55\x2a\x08\x88\x80\x44\x04\x71\x40\x50\x20\x01\x22\x4b\x90"
	b"\xc4\xb0\x06\xc8\xde\xe9\x74\x7a\xbd\xf7\xcc\x8f\x20\x8a\xe0\x4c"
	b"\xa5\x1b\xe9\x4c\xc9\x5b\xd5\x7f\xba\xee\xfd\xce\xf7\x3e\x7d\xee"
	b"\x39\xe7\x9e\xef\x34\xfc\xca\x25\xce\xf7\xa5\x7d\x3c\x46\x3a\x90"
	b"\x24\x73\x88\x65\x21\x2a\x32\x84\x16\xf2\x91\xcc\xa1\x59\xc4\x52"
	b"\x5d\xac\xe3\x09\xb7\xe1\xff\x0a\xc0\xbe\x80\x68\xe6\x8b\xce\x34"
	b"\x1a\xf2\xe9\x6c\x9a\x2a\x97\xaa\xd9\x94\x88\x99\x21\x01\xe8\xc2"
	b"\x66\x51\xa0\xad\x43\xf8\xc0\xe3\xaf\x95\xc7\x65\x01\x65\x54\x96"
	b"\xd8\x43\x8a\x7a\xe1\x01\xd8\xed\xc4\x90\x22\x76\x51\x9f\x30\x86"
	b"\xa6\x1e\xf9\xc4\x64\xa4\x73\xc0\xfa\x99\x3c\x29\x96\x86\x92\xaa"
	b"\x88\x25\x87\x2e\xee\x91\x68\x47\x7a\xe1\x29\x5b\x43\xf5\xc9\xb5"
	b"\xb2\x4a\x1b\x5c\x92\xc2\xce\x70\x9b\x3f\x03\xc0\xde\x0d\x41\xbc"
	b"\x58\x8f\x9a\x7c\x00\x46\x2f\x20\x30\x7e\x18\x6a\x8f\x41\xb8\x22"
	b"\xef\xc3\x2b\x8c\x21\xb5\x60\x90\xb3\x89\xf0\x1d\x45\x1e\xcd\xc3"
	b"\x5f\x14\x8f\x67\x79\x1a\x1c\x6a\x26\x53\xeb\x57\x5c\x84\x3b\xdc"
	b"\x00\x0c\x00\xa8\xa4\xa0\x9b\x07\x41\xde\x68\xc4\x6d\x0e\x94\x21"
	b"\x19\xc8\xc8\xed\x58\x44\x2e\x16\x62\x43\x6c\x63\x25\x42\xde\x8f"
	b"\xec\x1a\x8d\x9a\xd8\x8c\xa5\x61\x1e\x91\x1f\x5e\x89\xad\x71\x1c"
	b"\xf0\x41\xfb\x00\x30\x8c\xd1\x54\x45\x37\xe2\xcc\xa9\xc5\xd3\x7b"
	b"\x2b\x7a\x94\x07\x0b\x1b\x98\x8c\x81\x09\x80\x1a\x42\x0b\x9b\x80"
	b"\xb9\x42\x72\xd2\xfc\x31\x86\xcb\x0f\x60\xee\x3f\x86\x98\x8d\xaf"
	b"\x63\x70\x1c\xa5\x1d\x0c\x03\xad\x00\xfc\x0c\x44\x31\xbf\x81\x9a"
	b"\xbc\x1d\x11\x9d\x0d\xec\x52\x8f\x61\xe8\x58\x01\xc9\x03\x80\x77"
	b"\x82\x8c\x5e\x05\xce\xe7\xe1\xa8\x1d\xe1\x75\x32\x8e\x16\xf3\x20"
	b"\xfc\xc9\xd3\x70\x44\x0e\xc1\xc3\xf5\x40\xcf\xf6\x01\x60\x1f\x31"
	b"\x48\x31\x1c\xd4\xc7\x90\xca\xd5\xc0\x74\xc3\x3c\xc8\xba\x07\xec"
	b"\xdd\x41\xd4\x05\x19\x7d\x0b\x54\x46\x42\x7d\x1f\xf0\xee\x47\xe0"
	b"\x12\x3b\xd0\xd4\x07\xd1\x94\xcd\x78\xc9\x0c\xb7\xf9\x1f\x00\xe8"
	b"\x00\x28\x20\xcc\xc0\x70\x00\xae\x07\x65\x14\x18\x33\x41\x38\x82"
	b"\x8c\x5e\x0f\xea\xdb\x20\x66\xb6\x46\xa7\x75\xd0\x35\x9e\x69\xb7"
	b"\x1d\x48\x09\x77\x02\xe1\xd6\x25\x00\xe1\x4e\x20\xdc\xba\x04\x20"
	b"\xdc\x09\x84\x5b\x97\x00\x84\x3b\x81\x70\xeb\x12\x80\x70\x27\x10"
	b"\x6e\x5d\x02\x10\xee\x04\xc2\xad\x4b\x00\xc2\x9d\x40\xb8\xf5\xf3"
	b"\x6f\x65\x12\x68\x06\x6a\x4f\x7f\x82\x51\x2d\xe0\x00\x02\xe1\xb6"
	b"\xf9\xbf\x01\xe8\x40\x05\xc8\xb7\x80\x69\x80\x94\x4b\xa1\xd9\x0d"
	b"\x35\x11\x20\xb6\x04\x19\xbd\x14\x1c\x7f\x06\x6d\x1f\xd0\x1d\x80"
	b"\x06\x24\xdb\xd0\x39\x82\xc6\xef\xc3\x6d\xfe\xc7\x00\xea\x40\x57"
	b"\xc0\x97\x05\x5a\x0a\x70\x2a\xb0\x8d\xf8\xb2\x67\xe1\xe4\x8d\x20"
	b"\x66\x05\x19\x3d\x1b\x5c\xff\x00\xd7\x37\xc0\x34\x02\x48\x39\x97"
	b"\x80\x6f\x35\x5e\xed\x3a\x9a\x09\x16\xeb\x2f\x02\x60\x3d\x78\x3a"
	b"\x21\xab\x96\x40\xe3\x5e\x44\xec\x7b\x7a\xa9\xf8\x4b\x4d\x39\xa6"
	b"\xda\xc7\x09\x7e\xfb\x42\x02\xb1\x20\x6f\x41\xc7\xc3\x0c\x84\xab"
	b"\x2f\xea\xf1\x15\x28\xce\x02\x3c\x72\x60\xb8\xcd\xff\x00\xc0\xc3"
	b"\x26\x34\x57\x37\x44\x71\x35\xa6\x6d\xf7\x62\x88\x59\x48\x63\xdc"
	b"\x33\x4c\x54\xc6\x4a\xe8\x77\x9e\xfb\x52\x69\xdd\x39\x4a\x07\xbc"
	b"\xc0\x66\xa0\x14\xf0\x9d\x73\x65\x0e\x55\x1c\x90\x6f\x23\x5d\xdb"
	b"\x91\xa5\xf3\xd0\xbe\x2c\x44\xd6\xbf\x4c\x0b\xd7\x84\xdb\xfc\x19"
	b"\x00\xc5\x7b\x69\xb0\x1b\x7c\x90\x52\xfa\x1e\xf1\xef\xb8\x30\x35"
	b"\x1c\x44\xcd\x76\xa1\x5b\x4b\xd0\xc4\x74\xce\xae\x20\xd9\xc1\xf2"
	b"\x34\xa4\x4e\x81\xa8\x00\x68\x0f\x41\xf5\x48\x68\xc8\x03\xbd\xfc"
	b"\xdc\x26\x64\x6f\x34\xcf\x57\xf8\xcb\xe3\x09\x14\xed\xc2\xbb\xb9"
	b"\x9a\x66\xd7\x29\xb9\x91\x4d\x0c\x08\xb7\xfd\x1f\x75\x6e\xd9\x24"
	b"\x75\xd1\xa3\x69\x03\xf2\x8b\x5b\x31\x1e\xcc\xc6\x62\xbb\x1f\x77"
	b"\xd4\xab\x68\xc2\x7c\x36\x00\xb1\x18\x32\xde\x83\xbb\x6f\x86\xec"
	b"\x27\xa1\xe5\x5e\x58\xb5\x00\xd6\x55\x81\xfb\xe6\x73\xfd\x93\x8c"
	b"\xdf\xf3\x06\x4d\xa7\x4a\x71\x1f\x3f\x82\xb7\x31\x80\xa6\x7f\x52"
	b"\x32\xa0\x7d\xcc\x0d\x67\xd7\x06\x47\xa0\x52\xce\x38\xb2\xc4\x0c"
	b"\xa2\xd5\x35\x54\x8b\x47\x71\x8a\xfc\x9f\xdc\x72\x19\xe4\x74\x87"
	b"\xa7\x47\xc3\xd0\x58\x68\x7a\x0d\x9e\xb2\xc3\xa2\xe5\xd0\x5c\x7d"
	b"\x1e\x00\x87\x69\x92\x8d\x94\x6b\x85\xf2\x88\xde\x95\x6d\xcc\x2a"
	b"\xb9\xa9\xfd\x14\x49\xcf\x1a\xde\x8a\xd7\xa3\x01\x2b\xec\x7f\x92"
	b"\x1f\x51\x13\x30\xd2\xc4\xf3\x38\x7f\x5a\x41\x16\xcd\xe0\x1b\x0c"
	b"\x5a\x02\xb0\x1a\xe4\x97\xe0\xaf\x02\xdf\xe7\xe0\x3b\x77\x61\xa5"
	b"\x03\x2e\x54\xb9\x85\xf9\x25\xe9\xa7\xf7\x9f\xdb\x91\xce\x3b\xbe"
	b"\x17\x3f\x84\xa4\x75\x40\x3b\x67\x50\xcb\xf5\xc9\x34\xd1\x50\x35"
	b"\x56\x0c\xfc\x3a\x95\xf8\xec\x02\x22\x2b\xd6\x13\x57\xf2\x00\x29"
	b"\x1e\x43\xf1\x9b\x2c\xfb\xd9\x96\x06\x85\xdb\xea\xf9\xd5\xe6\xa5"
	b"\xb0\xf8\x9c\x72\x91\xeb\x7e\x8e\xe8\xef\xca\x50\x6b\x0a\x31\x57"
	b"\x2e\x26\xb5\x7a\x0a\xb9\x7a\x75\x5b\x63\xb5\x07\xb5\x79\x86\x17"
	b"\xd7\x32\x1b\x5b\xb2\x8e\xcc\xb7\xa0\x77\x59\x8b\xdb\x34\x9f\x93"
	b"\xd9\x9f\xc0\x91\x6f\xc1\x3b\x26\xd4\x84\xf2\x5a\xb0\x8a\x6c\xd6"
	b"\xe1\x53\x3f\xc3\xa7\xae\x23\x55\xe8\x18\x30\x87\xe0\x50\x23\x46"
	b"\xbe\x8b\x57\x66\x50\xae\x29\xf2\x4b\x3d\x9f\xa5\x7c\x56\xf2\x30"
	b"\x5a\x50\x00\xe8\x29\xa6\xa3\xc6\xb4\xa0\xa4\x79\x21\x72\x22\xbe"
	b"\xc4\x5b\xa8\xb6\xbd\x49\xad\x61\x52\xeb\x92\x20\x78\xd9\xed\xa8"
	b"\xe4\x2a\x23\x50\x62\xaf\x26\x32\xfd\x63\x8c\x29\xc7\x51\xcc\x45"
	b"\x40\x56\xd0\x41\x75\xaa\xf1\x68\x0d\xf8\x9d\x23\xb1\x1c\xf3\x88"
	b"\xcc\x13\x0b\xe4\x11\xef\x9e\xbc\xcb\x18\x5b\x72\x23\xb2\xed\x00"
	b"\x4c\xc4\x81\xb8\x17\x94\xb7\x80\x9b\x90\xa2\x1f\x9a\x7a\x3b\x9a"
	b"\x38\x19\x8a\xf9\x3c\x89\x85\xc9\x8a\xc2\x89\xb4\x3a\x6a\x46\xdd"
	b"\x89\x7f\xc4\x32\x4c\x69\xb7\x22\xcc\x59\xc0\x15\x41\x07\x96\xd4"
	b"\xe0\xd5\x1f\x41\x77\xac\xc3\xb2\x3b\x8d\x8e\xab\xf6\x89\xcc\xe2"
	b"\x06\x59\xe5\xfa\x1d\xb0\xb0\xed\x00\x04\x01\x24\x0b\x41\xce\x02"
	b"\xea\x80\xe5\x48\x79\x15\x3a\xfb\x43\x01\x20\x3a\x30\x8f\xce\xd1"
	b"\x39\x44\x5d\x15\x83\x52\x38\x09\x35\xeb\x6e\x94\x88\x06\x84\xc8"
	b"\xa3\xb5\x9e\x18\x2c\x80\x28\x34\x32\x40\x33\x62\xcc\x2e\x24\x3a"
	b"\x7e\x37\x11\x0d\x43\xc4\xc0\x7d\xab\xed\xf9\x9a\xb1\xed\x00\xa2"
	b"\xe5\x52\x9c\x6e\xd0\x9c\xd7\xa1\xea\x49\xe8\x9e\x15\x34\x3b\xb6"
	b"\xd2\xa8\x0d\x02\xb6\x06\x9d\x68\x4f\xc5\x80\xcf\x16\x8d\xa7\x60"
	b"\x06\x7a\xaf\x25\x10\xf5\x3a\x82\xa9\x5c\x98\x3d\x8b\xfe\xa0\xd4"
	b"\xa1\x74\x88\xc0\x3c\xec\xaf\x18\x36\x26\xd0\x5c\xbe\x42\xae\x74"
	b"\xdf\xd0\x76\x00\xc9\x14\x52\x71\xea\x18\x11\x9f\x3b\xb1\x64\xbd"
	b"\x89\x7f\xef\xb3\x38\x4a\xaa\x64\x95\xaf\x32\x84\xdf\x09\x9a\x15"
	b"\x37\x22\x61\x1a\x74\x7c\x02\x2c\xfd\x81\x2a\x71\x39\x8a\x79\x2f"
	b"\x88\x19\x04\xdd\x07\xe4\x6f\x21\xd0\x00\x81\xb5\x24\xf2\x92\xe2"
	b"\x41\x24\xf5\x40\xd8\x66\x63\x32\x3d\x28\xfa\xb9\x2f\x6b\x33\x00"
	b"\x39\x07\x21\x7e\x23\x3a\x60\x32\x5a\x09\x28\x13\x91\x86\x9d\xc4"
	b"\xa8\x8f\x89\xbe\x58\x81\x3d\xc1\x13\x10\x4b\xc0\xb8\x1b\x4c\x43"
	b"\x41\xc4\x01\x06\xa3\x03\xba\x16\x80\x69\x34\x88\xe4\xe0\xa2\x06"
	b"\x76\x42\xdd\xad\x50\x3d\x01\x74\x88\x00\x55\x41\x35\xcd\x24\x52"
	b"\x11\xa4\x93\xd0\xf6\x69\x70\x1c\x4b\xe8\x94\xba\x09\xb5\xe0\x1e"
	b"\xd4\xf4\xe1\x10\x35\x19\xf2\x5e\x84\x6f\xfb\x43\x4b\x08\xfe\x51"
	b"\x81\x64\x5a\x83\xb4\xae\x18\xff\x0e\x86\x3b\xc1\x38\x09\x82\xde"
	b"\x3e\xe9\x08\xca\x68\x60\x30\xf0\x21\x00\x66\xa0\x33\xd0\x80\x08"
	b"\x66\x1a\xb4\x8a\x91\x60\x8e\x82\xc8\xf7\x41\x71\x83\xc9\x02\xd1"
	b"\x1f\x80\x92\x03\xac\x0f\x9e\x40\x78\x14\xcc\x00\xa3\x02\x63\x41"
	b"\x14\x02\x31\xc0\x60\x10\xcf\xd2\x4a\xf5\xff\x4e\x6d\xef\x01\x4e"
	b"\xea\x30\xeb\x83\x31\x68\x02\x85\xd7\x40\x6e\x80\x40\x25\x52\x96"
	b"\x02\x8b\xc2\x6d\xa8\xad\x6a\x7b\x0f\x28\x97\xb3\x71\x39\x52\xd0"
	b"\x0f\xc5\x42\xf3\x24\x94\x53\xa5\x58\x8e\x5d\x8e\x1a\x78\x2a\xdc"
	b"\x66\x2e\x0a\x00\xb9\x96\x39\xa8\xb5\x57\x20\xbe\xda\x85\x7a\xd4"
	b"\x8f\xb2\xeb\x04\x91\x7b\x5f\x20\xc2\xbf\x2f\xdc\x66\x82\x51\xdb"
	b"\x67\x81\xdb\x19\x87\x2d\x46\x41\xcd\xea\x86\x9e\x3a\x15\x49\x3c"
	b"\xdf\x8d\x9f\x4e\xf5\x96\x21\xf6\xec\x43\x5d\x88\x48\xcc\x41\xef"
	b"\xb2\x0d\xcc\x5e\x24\x3a\x75\x9e\x7e\x38\x0e\x3f\x4c\x4e\xfd\x08"
	b"\x7c\x5d\x16\xe1\xed\xb0\x16\xd4\xe5\x18\xa9\x23\xdd\x5b\x81\x6b"
	b"\xfb\x1d\x1c\x89\x18\x85\xf1\x8a\x7c\xd4\xbe\x8b\x09\x24\xaf\x40"
	b"\x13\xa6\x8b\x75\x86\xb2\xed\x63\x40\xba\x78\x1b\x91\x34\x14\xb2"
	b"\x1e\x40\xc6\x3f\x07\x89\xf7\x63\x7d\x7c\x28\xd6\x8a\xbb\x30\xec"
	b"\x9c\x88\xde\x6d\x3b\xf4\x7a\x1c\x4c\x1b\x11\x48\xe2\x7d\xa5\xc4"
	b"\xef\x8f\xc2\x5f\x2e\xd1\x07\xdc\x07\x9d\xea\x40\x4c\x20\x80\x8f"
	b"\xc3\x5a\x26\x96\x95\x99\x44\x9a\xd7\xe0\x1f\x3e\x98\x40\xcc\x5c"
	b"\x88\x3c\x88\x54\x3e\xbc\x38\xf6\x83\x01\x10\x25\xf7\xe2\xf3\x97"
	b"\xa1\xb5\xbc\x8a\xf4\xff\x0b\xcc\x4d\x28\xd6\xf1\xe8\x19\xcb\x70"
	b"\x5b\x1f\x44\x8d\x4b\xc1\x90\x30\x1f\xc4\x8b\x00\xa8\xf2\x45\x84"
	b"\x51\x47\xda\xe2\xd0\xd2\x56\x43\xe4\x1d\x80\x44\xa2\x12\xe0\x19"
	b"\x5c\xc3\x46\xa1\x8b\x15\xd0\x71\x12\x52\xe9\x0d\x62\x22\x30\xa2"
	b"\xfd\x02\xc8\x67\x0a\x3b\xab\xf7\xe0\x58\xdf\x19\x3d\x46\x23\x10"
	b"\x97\x80\xa6\x47\xe1\x3b\x1a\x8f\x7f\xef\xa7\xa8\xe9\x9d\x51\x7a"
	b"\xbc\x8f\x62\xea\x03\x08\x84\x2f\x19\xf7\x81\x41\xa8\x87\xbf\x81"
	b"\xdc\x24\xa4\xed\x55\x84\xd8\x8d\xe0\x24\x22\x30\x91\xb8\xa2\x12"
	b"\xea\xcc\x37\xc0\xe0\x27\x91\x29\xaf\x80\x2d\x17\xc5\x9a\x0f\xec"
	b"\x68\x97\x00\xc4\x1e\x36\xc8\xd8\xfa\x97\xf0\x2c\xb9\x01\xc3\xce"
	b"\x24\x1c\xd6\x1d\xb8\xf4\x2b\x71\xd4\xbe\x42\xe0\xc4\xcb\x18\xe2"
	b"\xf6\x60\xb0\xcd\xc5\x64\x7a\x06\x81\xc0\xec\x7d\x81\x13\x55\x1e"
	b"\x1a\x1d\xd7\x90\xd4\x69\x0e\x22\xe1\x20\xaa\x3a\x06\x85\x72\x4c"
	b"\x3e\x41\xd6\x9e\x25\x6c\x35\x3f\x81\xa7\x28\x17\xad\x6f\x3d\x86"
	b"\x09\xdf\x42\xb6\xf7\x62\xd5\x6d\xdb\x0c\x60\xc7\x4a\x34\xfb\x78"
	b"\xfd\x11\xf4\x1a\x23\x5d\xeb\xfa\xb0\x5f\x19\x41\x83\x5c\x2b\x2b"
	b"\xe4\x6d\x44\xea\xef\xd2\x58\x5d\x27\xfa\x97\x77\xc6\x24\x8a\x10"
	b"\x40\x47\xf9\x09\x7e\x5d\xca\xaf\x65\xbe\xc8\xa8\xe9\x80\x59\xd4"
	b"\x63\x11\x0d\x98\xb0\x92\x24\xbb\xd2\x45\x5b\xcb\x1a\x8a\x30\xd7"
	b"\xe6\x61\x54\xa2\x51\xc6\x56\x5e\xcc\x53\xe4\x41\x15\xbd\x8a\x3f"
	b"\xc2\x05\x4c\xe1\x0b\x9d\xd3\xcb\xf6\x02\xa2\x00\xf8\x63\x6b\xf2"
	b"\xda\x0f\x17\x6f\x67\x01\x00\x82\x7f\x9e\xbe\xb6\xef\x8f\x42\x35"
	b"\xb0\x82\x9d\xc0\x7c\xbb\x5d\x1b\x0a\xda\x51\x90\x3f\xbc\x0b\x5c"
	b"\x04\xfd\xea\xcf\x07\xfc\xea\x01\xb4\x9b\x63\xeb\x48\x02\x08\xbe"
	b"\x7f\x04\x3a\x00\x30\x19\x02\x36\x50\xe6\xd0\xfa\xa2\x1c\x84\xb4"
	b"\x12\xd0\x3f\x00\xe2\xcf\x7c\xd5\x02\x94\x21\x31\xa3\x07\xb3\x29"
	b"\xfa\x4b\xc9\x2d\x17\x61\xd4\x66\xa3\xea\xe9\x28\xf2\x51\x40\xd7"
	b"\xf6\xa1\xd4\xac\x02\xc3\x78\x20\x3a\xb8\xb0\xfa\x64\x68\xf9\x14"
	b"\xe4\x74\x00\x02\xa0\xdf\x8d\x3f\x90\x87\x5b\xce\xe2\x14\x2d\xed"
	b"\x07\xc0\x29\x79\x17\xd6\xa6\x79\x44\xd7\x2f\xc3\xe4\xcf\x44\x31"
	b"\x94\x6a\xa3\xc9\xa9\xff\x37\xad\x1b\x19\xc1\x3e\xac\x87\x80\x5e"
	b"\x20\xaf\x46\x07\x06\xa1\x3b\xfb\xe3\xab\x2b\xa1\xc6\xdf\x47\xae"
	b"\xa2\x48\x04\x19\xf6\x82\x2b\x4f\x17\x36\x91\x9a\xdc\x9d\xf8\xbb"
	b"\x9e\xc4\x72\xcf\x64\xd4\xae\xbb\xc0\x50\x05\x64\x5c\x80\xf0\x5e"
	b"\x20\x0e\x9c\x95\x68\x1b\xbf\x20\x30\xb7\x07\x2d\x5f\xa7\xc9\xdd"
	b"\x81\xae\xed\xa6\x07\x88\x28\x09\x96\xfa\x44\x28\x6a\x44\x89\x4b"
	b"\x46\x19\x35\x15\xc5\x76\x1f\x01\xd3\xdf\x80\x4e\x21\x84\x76\xa2"
	b"\xeb\xe9\x68\x4e\x23\x86\xdd\x11\x28\x4b\xe2\x10\x65\x85\x24\x05"
	b"\x16\x8b\xf9\xb8\xdb\x4f\x0f\x18\x86\x60\x25\xd7\x8a\xfe\x66\x3f"
	b"\x56\xdb\x95\x98\x7b\xc5\x61\xb4\x6d\xc7\x69\xce\x47\x9e\x3e\x62"
	b"\x15\x9c\xea\xf1\xeb\xb3\x69\x6e\x9c\x43\x54\xc5\x71\xa2\xca\x17"
	b"\xe3\x6d\x9c\x4c\xa3\x3e\xb3\xb8\x12\x47\xbb\x01\xf0\xbd\xec\xdd"
	b"\xe9\x4d\xa2\x98\x47\xa2\xb1\x14\x83\xe1\x0f\x9c\x50\xa6\xa1\x85"
	b"\x50\x1b\x04\x8d\x16\x39\x8b\x2a\xbd\x23\xf1\x3e\x17\x3d\xb5\x4f"
	b"\x31\x73\x47\xf1\x47\x38\xe1\x67\xfe\x3d\x1e\x6e\xd9\xfb\xa2\xd0"
	b"\x93\x68\x34\xac\x7c\x87\x31\xa4\xb3\x24\x12\x68\x42\xca\x32\x5a"
	b"\x44\x34\x4d\xc5\x9e\xb3\x0b\x98\xff\x01\xce\x3e\x07\xc4\x48\x1d"
	b"\x56\x52\x00\x00\x00\x00\x49\x45\x4e\x44\xae\x42\x60\x82"
)


# EOF
