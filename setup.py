import setuptools

setuptools.setup(
	name='typewrap',
	version='0.1.0',
	packages=[
		'typewrap',
	],
	description='Wrap PEG-generated Javascript parsers into typed TypeScript modules',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Code Generators",
		"Development Status :: 3 - Alpha",
	],
	python_requires='>=3.9',
	entry_points={
		'console_scripts': ['typewrap=typewrap.__main__:run'],
	},
)
