"""Operations: setting the default toolchain, creating toolchains, listing revisions, uninstalling."""